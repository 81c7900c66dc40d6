"""Messaging schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.shared.schemas import EntityModel, WritePayload


class Destinataire(BaseModel):
    model_config = ConfigDict(extra="allow")

    uuid: str | None = None
    type: str | None = None
    email: str | None = None
    nom: str | None = None


class PieceJointe(BaseModel):
    model_config = ConfigDict(extra="allow")

    nom_fichier: str
    url: str
    type_mime: str | None = None
    taille_octets: int | None = None


class Message(EntityModel):
    sujet: str | None = None
    contenu: str | None = None
    contenu_html: str | None = None

    expediteur_uuid: str | None = None
    expediteur_type: str | None = None
    expediteur_nom: str | None = None
    expediteur_email: str | None = None
    destinataires: list[Destinataire] = Field(default_factory=list)

    parent_uuid: str | None = None
    conversation_uuid: str | None = None

    statut_envoi: str | None = None
    statut_lecture: str | None = None
    priorite: str | None = None
    est_lu: bool | None = None

    pieces_jointes: list[PieceJointe] = Field(default_factory=list)


class MessageCreate(WritePayload):
    destinataire_email: str | None = None
    destinataire_uuid: str | None = None
    sujet: str
    contenu: str
    contenu_html: str | None = None
    priorite: str | None = None
    type: str | None = None
    pieces_jointes: list[PieceJointe] | None = None


class PublicMessageCreate(WritePayload):
    nom: str
    email: str
    telephone: str | None = None
    sujet: str
    message: str
    reference_type: str | None = None
    reference_uuid: str | None = None


class MessageUpdate(WritePayload):
    sujet: str | None = None
    contenu: str | None = None
    priorite: str | None = None
    statut_lecture: str | None = None


class ReplyCreate(WritePayload):
    contenu: str
    contenu_html: str | None = None
    pieces_jointes: list[PieceJointe] | None = None


class MessageStats(BaseModel):
    model_config = ConfigDict(extra="allow")

    total: int = 0
    non_lus: int = 0
    lus: int = 0
    archives: int = 0
    envoyes: int = 0


class Participant(BaseModel):
    model_config = ConfigDict(extra="allow")

    uuid: str
    type: str | None = None
    nom: str | None = None
    email: str | None = None
    avatar: str | None = None


class Conversation(EntityModel):
    sujet: str | None = None
    participants: list[Participant] = Field(default_factory=list)
    dernier_message: Message | None = None
    nombre_messages: int = 0
    nombre_messages_non_lus: int = 0
    date_dernier_message: datetime | None = None


class ConversationThread(BaseModel):
    """A conversation with one page of its messages."""

    conversation: Conversation
    messages: list[Message] = Field(default_factory=list)
    total: int = 0

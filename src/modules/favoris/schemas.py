"""Favorites schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.shared.enums import FavoriStatut, Priorite, SortOrder, TypeElement
from src.shared.schemas import EntityModel, WritePayload


class Favori(EntityModel):
    utilisateur_uuid: str
    type_element: TypeElement
    element_uuid: str

    element_titre: str | None = None
    element_description: str | None = None
    element_image: str | None = None
    element_prix: float | None = None
    element_ville: str | None = None

    date_ajout: datetime | None = None
    nombre_vues: int = 0
    notes_utilisateur: str | None = None
    tags_personnels: list[str] = Field(default_factory=list)

    collection_uuid: str | None = None
    priorite: Priorite = Priorite.MOYEN
    statut: FavoriStatut = FavoriStatut.ACTIF
    notifications_actives: bool = False


class FavoriCreate(WritePayload):
    utilisateur_uuid: str
    type_element: TypeElement
    element_uuid: str

    element_titre: str | None = None
    element_description: str | None = None
    element_image: str | None = None
    element_prix: float | None = None
    element_ville: str | None = None

    collection_uuid: str | None = None
    priorite: Priorite | None = None
    notes_utilisateur: str | None = None
    tags_personnels: list[str] | None = None
    notifications_actives: bool | None = None
    metadata: dict[str, Any] | None = None


class FavoriUpdate(WritePayload):
    priorite: Priorite | None = None
    statut: FavoriStatut | None = None
    collection_uuid: str | None = None
    notes_utilisateur: str | None = None
    tags_personnels: list[str] | None = None
    notifications_actives: bool | None = None
    metadata: dict[str, Any] | None = None


class ToggleResult(BaseModel):
    added: bool
    favori: Favori | None = None


class RegleTri(BaseModel):
    champ: str
    ordre: SortOrder = SortOrder.ASC


class CollectionFavoris(EntityModel):
    """A named group of favorites; ``statut`` is one of actif, archive, prive, public."""

    utilisateur_uuid: str
    nom: str
    description: str | None = None
    icone: str | None = None
    couleur: str | None = None

    nombre_favoris: int = 0
    favoris_visibles: bool = True
    partageable: bool = False
    code_partage: str | None = None

    statut: str = "actif"
    priorite: Priorite = Priorite.MOYEN
    regles_tri: RegleTri | None = None
    tags: list[str] = Field(default_factory=list)
    favoris: list[Favori] = Field(default_factory=list)


class CollectionCreate(WritePayload):
    utilisateur_uuid: str
    nom: str = Field(..., min_length=1)
    description: str | None = None
    icone: str | None = None
    couleur: str | None = None
    favoris_visibles: bool | None = None
    partageable: bool | None = None
    statut: str | None = None
    priorite: Priorite | None = None
    regles_tri: RegleTri | None = None
    tags: list[str] | None = None


class CollectionUpdate(WritePayload):
    nom: str | None = None
    description: str | None = None
    icone: str | None = None
    couleur: str | None = None
    favoris_visibles: bool | None = None
    partageable: bool | None = None
    statut: str | None = None
    priorite: Priorite | None = None
    regles_tri: RegleTri | None = None
    tags: list[str] | None = None

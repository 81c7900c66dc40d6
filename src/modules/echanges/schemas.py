"""Exchange schemas."""

from pydantic import AliasChoices, Field

from src.shared.schemas import EntityModel, WritePayload


class Echange(EntityModel):
    nom_elemente_change: str | None = Field(
        default=None, validation_alias=AliasChoices("nom_elemente_change", "titre")
    )
    description: str | None = None
    type_echange: str | None = None
    objet_propose: str | None = None
    objet_demande: str | None = None
    prix: float | None = None
    quantite: int | None = None
    image: str | None = None
    categorie_uuid: str | None = None
    statut: str | None = None
    est_public: bool | None = None
    est_bloque: bool = False


class EchangeCreate(WritePayload):
    nom_elemente_change: str = Field(..., min_length=1)
    type_echange: str = "produit"
    objet_propose: str
    objet_demande: str
    description: str | None = None
    prix: float | None = Field(None, ge=0)
    quantite: int = Field(1, ge=1)
    categorie_uuid: str | None = None
    image: str | None = None


class EchangeUpdate(WritePayload):
    nom_elemente_change: str | None = None
    objet_propose: str | None = None
    objet_demande: str | None = None
    description: str | None = None
    prix: float | None = Field(None, ge=0)
    quantite: int | None = Field(None, ge=1)
    statut: str | None = None

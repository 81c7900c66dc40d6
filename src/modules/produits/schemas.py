"""Product schemas."""

from pydantic import AliasChoices, Field

from src.shared.schemas import EntityModel, WritePayload


class Produit(EntityModel):
    libelle: str = Field(default="", validation_alias=AliasChoices("libelle", "titre", "nom"))
    slug: str | None = None
    description: str | None = None
    prix: float | None = Field(default=None, validation_alias=AliasChoices("prix", "prix_unitaire_ttc"))
    quantite: int | None = Field(default=None, validation_alias=AliasChoices("quantite", "quantite_disponible"))
    image: str | None = None
    categorie_uuid: str | None = None
    boutique_uuid: str | None = None
    statut: str | None = None
    est_publie: bool = False
    est_bloque: bool = False
    is_deleted: bool = False


class ProduitCreate(WritePayload):
    libelle: str = Field(..., min_length=1)
    description: str | None = None
    prix: float = Field(..., ge=0)
    quantite: int = Field(1, ge=0)
    categorie_uuid: str
    boutique_uuid: str | None = None
    image: str | None = None


class ProduitUpdate(WritePayload):
    libelle: str | None = None
    description: str | None = None
    prix: float | None = Field(None, ge=0)
    quantite: int | None = Field(None, ge=0)
    categorie_uuid: str | None = None
    image: str | None = None
    statut: str | None = None


class StockUpdate(WritePayload):
    quantite: int = Field(..., ge=0)
    motif: str | None = None

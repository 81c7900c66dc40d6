"""Country schemas."""

from pydantic import Field

from src.shared.schemas import EntityModel, WritePayload


class Pays(EntityModel):
    code: str
    nom: str
    nom_complet: str | None = None
    continent: str | None = None
    capitale: str | None = None
    indicatif: str | None = None
    devise: str | None = None
    code_iso2: str | None = None
    code_iso3: str | None = None
    drapeau_url: str | None = None
    statut: str | None = None
    actif: bool | None = None
    defaut: bool = False
    ordre_affichage: int = 0
    villes_count: int | None = None


class PaysCreate(WritePayload):
    code: str = Field(..., min_length=2, max_length=3)
    nom: str = Field(..., min_length=1)
    indicatif: str | None = None
    nom_complet: str | None = None
    continent: str | None = None
    capitale: str | None = None
    devise: str | None = None
    code_iso2: str | None = None
    code_iso3: str | None = None
    statut: str | None = None


class PaysUpdate(WritePayload):
    code: str | None = Field(None, min_length=2, max_length=3)
    nom: str | None = None
    indicatif: str | None = None
    nom_complet: str | None = None
    continent: str | None = None
    capitale: str | None = None
    devise: str | None = None
    statut: str | None = None

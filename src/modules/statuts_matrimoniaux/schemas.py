"""Marital status schemas."""

from pydantic import Field

from src.shared.schemas import EntityModel, WritePayload


class StatutMatrimonial(EntityModel):
    code: str
    libelle: str
    description: str | None = None
    genre: str | None = None
    statut: str | None = None
    actif: bool | None = None
    defaut: bool = False
    ordre_affichage: int = 0

    @property
    def is_active(self) -> bool:
        if self.actif is not None:
            return self.actif
        return self.statut in (None, "actif")


class StatutMatrimonialCreate(WritePayload):
    code: str = Field(..., min_length=1)
    libelle: str = Field(..., min_length=1)
    description: str | None = None
    statut: str | None = None
    defaut: bool | None = None


class StatutMatrimonialUpdate(WritePayload):
    code: str | None = None
    libelle: str | None = None
    description: str | None = None
    statut: str | None = None
    defaut: bool | None = None

"""Role schemas."""

from pydantic import AliasChoices, BaseModel, Field

from src.shared.enums import Statut
from src.shared.schemas import EntityModel, WritePayload


class Role(EntityModel):
    name: str = Field(default="", validation_alias=AliasChoices("name", "nom"))
    code: str | None = None
    description: str | None = None
    feature: str | None = None
    status: str | None = Field(default=None, validation_alias=AliasChoices("status", "statut"))
    est_actif: bool | None = None
    is_deleted: bool = False

    @property
    def is_active(self) -> bool:
        if self.is_deleted:
            return False
        if self.est_actif is not None:
            return self.est_actif
        return self.status == Statut.ACTIF


class RoleCreate(WritePayload):
    name: str
    code: str | None = None
    description: str | None = None
    feature: str | None = None
    status: Statut | None = None


class RoleUpdate(WritePayload):
    name: str | None = None
    code: str | None = None
    description: str | None = None
    feature: str | None = None
    status: Statut | None = None


class RoleOption(BaseModel):
    value: str
    label: str
    data: Role

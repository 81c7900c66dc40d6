"""Pydantic schemas for marketplace users."""

from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from src.shared.schemas import EntityModel, ListParams, WritePayload


class UserRoleRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    uuid: str
    name: str | None = None
    status: str | None = None


class User(EntityModel):
    nom: str | None = None
    prenoms: str | None = None
    email: str | None = None
    indicatif: str | None = None
    telephone: str | None = None
    avatar: str | None = None
    date_naissance: date | None = None

    civilite_uuid: str | None = None
    statut_matrimonial_uuid: str | None = None
    role_uuid: str | None = None
    role: UserRoleRef | None = None

    statut: str | None = None
    est_verifie: bool = False
    est_bloque: bool = False
    is_admin: bool = False
    is_deleted: bool = False

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.prenoms, self.nom) if part)


class UserCreate(WritePayload):
    nom: str
    prenoms: str
    email: EmailStr
    telephone: str
    indicatif: str | None = None
    mot_de_passe: str | None = None
    civilite_uuid: str | None = None
    statut_matrimonial_uuid: str | None = None
    role_uuid: str | None = None
    date_naissance: date | None = None


class UserUpdate(WritePayload):
    nom: str | None = None
    prenoms: str | None = None
    email: EmailStr | None = None
    telephone: str | None = None
    indicatif: str | None = None
    civilite_uuid: str | None = None
    statut_matrimonial_uuid: str | None = None
    role_uuid: str | None = None
    date_naissance: date | None = None


class UserListParams(ListParams):
    """Admin user listing; sorting travels as camelCase on this endpoint."""

    status: str | None = None
    role: str | None = Field(default=None, validation_alias=AliasChoices("role", "role_uuid"))

    def base_query(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "search": self.search,
            "status": self.status,
            "role": self.role,
            "sortBy": self.sort_by,
            "sortOrder": self.sort_order,
        }

"""Common Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.core.config import settings
from src.shared.enums import SortOrder
from src.shared.normalize import NormalizedList

T = TypeVar("T", bound=BaseModel)


class EntityModel(BaseModel):
    """Server-owned record identified by ``uuid``; unknown fields are kept."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    uuid: str
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt", "date_creation"),
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt", "date_modification"),
    )


class WritePayload(BaseModel):
    """Base for request bodies: unset fields are not sent."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, mode="json")


class ListParams(BaseModel):
    page: int | None = Field(None, ge=1)
    limit: int | None = Field(None, ge=1)
    search: str | None = None
    sort_by: str | None = None
    sort_order: SortOrder | None = None
    filters: dict[str, Any] = Field(default_factory=dict)

    @field_validator("limit")
    @classmethod
    def _cap_limit(cls, value: int | None) -> int | None:
        if value is not None and value > settings.max_limit:
            return settings.max_limit
        return value

    def base_query(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "search": self.search,
            "sort_by": self.sort_by,
            "sort_order": self.sort_order,
        }

    def to_query(self) -> dict[str, str]:
        """Flatten pagination and filters into query-string values."""
        query: dict[str, str] = {}
        for key, value in {**self.base_query(), **self.filters}.items():
            if value is None or value == "":
                continue
            if isinstance(value, (list, tuple, set)):
                query[key] = ",".join(str(item) for item in value)
            elif isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = str(value)
        return query


class Page(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    pages: int

    @classmethod
    def from_normalized(cls, normalized: NormalizedList, model: type[T]) -> "Page[T]":
        return cls(
            items=[model.model_validate(item) for item in normalized.items],
            total=normalized.total,
            page=normalized.page,
            pages=normalized.pages,
        )


class ActionMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str | None = None

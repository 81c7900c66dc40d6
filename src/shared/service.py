"""Base class for REST resource services."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.core.config import settings
from src.core.exceptions import ApiError, MalformedResponseError
from src.core.http import ApiClient
from src.shared.normalize import normalize_detail, normalize_list, unwrap_data
from src.shared.schemas import ListParams, Page

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ResourceService:
    """Facade over one REST resource.

    Every call goes straight to the API; errors are logged and re-raised
    unchanged so callers decide how to present them.
    """

    resource_name = "resource"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def get_service_name(self) -> str:
        return self.__class__.__name__

    async def _call(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            return await self.api.request(method, url, **kwargs)
        except ApiError as exc:
            logger.error(
                "%s %s %s failed (%s): %s",
                self.get_service_name(),
                method,
                url,
                exc.status_code,
                exc.detail,
            )
            raise

    def _malformed(self, what: str, exc: PydanticValidationError, payload: Any) -> MalformedResponseError:
        logger.error(
            "%s received an invalid %s %s: %s",
            self.get_service_name(),
            self.resource_name,
            what,
            exc.errors(include_url=False),
        )
        return MalformedResponseError(
            f"Invalid {self.resource_name} {what}: {exc.error_count()} error(s)",
            payload=payload,
        )

    def _parse(self, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as exc:
            raise self._malformed("payload", exc, data) from exc

    async def _fetch_page(
        self,
        url: str,
        model: type[M],
        params: ListParams | None = None,
        query: dict[str, str] | None = None,
    ) -> Page[M]:
        params = params or ListParams()
        raw = await self._call("GET", url, params=query if query is not None else params.to_query())
        normalized = normalize_list(
            raw,
            page=params.page or settings.default_page,
            limit=params.limit or settings.default_limit,
        )
        try:
            return Page[model].from_normalized(normalized, model)
        except PydanticValidationError as exc:
            raise self._malformed("list item", exc, raw) from exc

    async def _fetch_items(self, url: str, model: type[M], query: dict[str, str] | None = None) -> list[M]:
        raw = await self._call("GET", url, params=query)
        return [self._parse(model, item) for item in normalize_list(raw).items]

    async def _fetch_entity(self, method: str, url: str, model: type[M], json: Any = None) -> M:
        kwargs: dict[str, Any] = {} if json is None else {"json": json}
        raw = await self._call(method, url, **kwargs)
        return self._parse(model, normalize_detail(raw))

    async def _fetch_data(self, method: str, url: str, json: Any = None) -> Any:
        kwargs: dict[str, Any] = {} if json is None else {"json": json}
        return unwrap_data(await self._call(method, url, **kwargs))

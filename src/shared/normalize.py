"""Normalization of the inconsistent response envelopes returned by the API.

List endpoints answer with a bare array, ``{"data": [...]}``,
``{"data": {"data": [...]}}`` or an object holding a single plural field such
as ``{"favoris": [...]}``, with optional ``total``/``count``/``page``/``pages``
metadata next to the items. Each shape is handled by one extraction strategy;
the strategies are tried in order and the first match wins.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from src.core.exceptions import MalformedResponseError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedList:
    items: list[Any]
    total: int | None = None
    page: int | None = None
    pages: int | None = None
    strategy: str = ""


@dataclass(frozen=True)
class NormalizedList:
    items: list[Any]
    total: int
    page: int
    pages: int

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


ListStrategy = Callable[[Any], "ExtractedList | None"]


def _as_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return None


def _first_int(*values: Any) -> int | None:
    for value in values:
        number = _as_int(value)
        if number is not None:
            return number
    return None


def _meta(container: Mapping[str, Any], items: list[Any], strategy: str) -> ExtractedList:
    return ExtractedList(
        items=items,
        total=_first_int(container.get("total"), container.get("count")),
        page=_as_int(container.get("page")),
        pages=_as_int(container.get("pages")),
        strategy=strategy,
    )


def bare_array(raw: Any) -> ExtractedList | None:
    if isinstance(raw, list):
        return ExtractedList(items=raw, total=len(raw), strategy="bare_array")
    return None


def data_array(raw: Any) -> ExtractedList | None:
    if isinstance(raw, Mapping) and isinstance(raw.get("data"), list):
        return _meta(raw, raw["data"], "data_array")
    return None


def nested_data_array(raw: Any) -> ExtractedList | None:
    if not isinstance(raw, Mapping):
        return None
    inner = raw.get("data")
    if isinstance(inner, Mapping) and isinstance(inner.get("data"), list):
        return _meta(inner, inner["data"], "nested_data_array")
    return None


def single_array_property(raw: Any) -> ExtractedList | None:
    if not isinstance(raw, Mapping):
        return None
    inner = raw.get("data")
    containers = (inner, raw) if isinstance(inner, Mapping) else (raw,)
    for container in containers:
        arrays = [key for key, value in container.items() if isinstance(value, list)]
        if len(arrays) == 1:
            key = arrays[0]
            return _meta(container, container[key], f"single_array_property:{key}")
    return None


LIST_STRATEGIES: tuple[ListStrategy, ...] = (
    bare_array,
    data_array,
    nested_data_array,
    single_array_property,
)


def extract_list(raw: Any, strategies: tuple[ListStrategy, ...] = LIST_STRATEGIES) -> ExtractedList | None:
    for strategy in strategies:
        extracted = strategy(raw)
        if extracted is not None:
            return extracted
    return None


def normalize_list(raw: Any, page: int | None = None, limit: int | None = None) -> NormalizedList:
    """Turn any list envelope into ``(items, total, page, pages)``.

    Never raises for an unexpected shape: it degrades to an empty list and
    logs a warning.
    """
    extracted = extract_list(raw)
    if extracted is None:
        logger.warning("Unrecognized list response shape (%s); using an empty list", type(raw).__name__)
        extracted = ExtractedList(items=[], strategy="empty")
    else:
        logger.debug("List response matched %s (%d items)", extracted.strategy, len(extracted.items))

    total = extracted.total if extracted.total is not None else len(extracted.items)

    outer = raw if isinstance(raw, Mapping) else {}
    inner = outer.get("data") if isinstance(outer.get("data"), Mapping) else {}

    resolved_page = _first_int(outer.get("page"), inner.get("page"), extracted.page, page) or 1

    resolved_pages = _first_int(outer.get("pages"), inner.get("pages"), extracted.pages)
    if resolved_pages is None:
        resolved_pages = math.ceil(total / limit) if limit else 1
    resolved_pages = max(resolved_pages, 1)

    return NormalizedList(items=extracted.items, total=total, page=resolved_page, pages=resolved_pages)


def normalize_detail(raw: Any, id_field: str = "uuid") -> dict[str, Any]:
    """Extract a single entity from ``{"data": {...}}`` or a bare object."""
    if raw is None:
        raise NotFoundError("Ressource non trouvée")
    if not isinstance(raw, Mapping):
        raise MalformedResponseError(f"Unexpected detail response type: {type(raw).__name__}", payload=raw)

    inner = raw.get("data")
    if isinstance(inner, Mapping) and inner.get(id_field):
        return dict(inner)
    if raw.get(id_field):
        return dict(raw)

    logger.warning("Detail response without %r: keys=%s", id_field, sorted(raw.keys()))
    raise NotFoundError("Ressource non trouvée", payload=raw)


def unwrap_data(raw: Any) -> Any:
    """Return ``raw["data"]`` when present, else ``raw`` unchanged."""
    if isinstance(raw, Mapping) and "data" in raw:
        return raw["data"]
    return raw

"""Client exception hierarchy and HTTP status mapping."""

from __future__ import annotations

from typing import Any

import httpx


class ApiError(Exception):
    """Base class for every error raised by the API client."""

    def __init__(self, detail: str, status_code: int | None = None, payload: Any = None):
        self.detail = detail
        self.status_code = status_code
        self.payload = payload
        super().__init__(detail)


class TransportError(ApiError):
    """Network failure, timeout, or an unexpected HTTP status."""


class MalformedResponseError(ApiError):
    """The response body cannot be interpreted."""


class NotFoundError(ApiError):
    """The resource does not exist (404 or missing entity)."""


class ValidationError(ApiError):
    """The server rejected the payload (400/422)."""

    def __init__(
        self,
        detail: str,
        status_code: int | None = None,
        payload: Any = None,
        errors: list[str] | None = None,
    ):
        super().__init__(detail, status_code, payload)
        self.errors = errors or []


class ConflictError(ApiError):
    """The resource already exists (409)."""


class AuthenticationError(ApiError):
    """Missing or rejected credentials (401)."""


class PermissionDeniedError(ApiError):
    """Authenticated but not allowed (403)."""


_STATUS_PREFIXES = {
    httpx.codes.NOT_FOUND: "Ressource non trouvée",
    httpx.codes.UNAUTHORIZED: "Authentification requise",
    httpx.codes.FORBIDDEN: "Accès refusé",
    httpx.codes.INTERNAL_SERVER_ERROR: "Erreur serveur",
}

_USER_MESSAGES = {
    NotFoundError: "L'élément demandé est introuvable.",
    ValidationError: "Les données envoyées sont invalides.",
    ConflictError: "Cet élément existe déjà.",
    AuthenticationError: "Votre session a expiré. Veuillez vous reconnecter.",
    PermissionDeniedError: "Vous n'avez pas les droits nécessaires pour cette action.",
    MalformedResponseError: "Réponse inattendue du serveur.",
    TransportError: "Impossible de contacter le serveur. Veuillez réessayer plus tard.",
}


def _extract_message(payload: Any) -> str | None:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    return None


def _extract_field_errors(payload: Any) -> list[str]:
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if isinstance(errors, list):
        return [str(item.get("message", item)) if isinstance(item, dict) else str(item) for item in errors]
    if isinstance(errors, dict):
        messages: list[str] = []
        for field, value in errors.items():
            values = value if isinstance(value, list) else [value]
            messages.extend(f"{field}: {item}" for item in values)
        return messages
    message = payload.get("message")
    if isinstance(message, list):
        return [str(item) for item in message]
    return []


def error_from_response(status_code: int, payload: Any = None) -> ApiError:
    """Build the exception matching an unsuccessful HTTP status."""
    message = _extract_message(payload)
    if message is None:
        reason = httpx.codes.get_reason_phrase(status_code) or "Unknown"
        message = f"Erreur {status_code}: {reason}"

    prefix = _STATUS_PREFIXES.get(status_code)
    detail = f"{prefix}: {message}" if prefix else message

    if status_code == httpx.codes.NOT_FOUND:
        return NotFoundError(detail, status_code, payload)
    if status_code == httpx.codes.UNAUTHORIZED:
        return AuthenticationError(detail, status_code, payload)
    if status_code == httpx.codes.FORBIDDEN:
        return PermissionDeniedError(detail, status_code, payload)
    if status_code == httpx.codes.CONFLICT:
        return ConflictError(detail, status_code, payload)
    if status_code in (httpx.codes.BAD_REQUEST, httpx.codes.UNPROCESSABLE_ENTITY):
        return ValidationError(detail, status_code, payload, errors=_extract_field_errors(payload))
    return TransportError(detail, status_code, payload)


def user_message(exc: Exception) -> str:
    """Return the French copy shown to end users for a failed action."""
    for error_cls, text in _USER_MESSAGES.items():
        if isinstance(exc, error_cls):
            if isinstance(exc, ValidationError) and exc.errors:
                return f"{text} {' '.join(exc.errors)}"
            return text
    return "Une erreur est survenue lors de la communication avec le serveur."

"""Request payload validation on top of marshmallow schemas."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from marshmallow import Schema, ValidationError

from ..core.error_handlers import InvalidRequestError


def load_payload(schema: Schema, payload: Optional[Mapping[str, Any]], message: str) -> dict:
    """Deserialize ``payload`` with ``schema``.

    Raises:
        InvalidRequestError: the body is missing, not an object, or fails
            validation. ``message`` is the user-facing text; the field errors
            travel in ``error``.
    """

    if not isinstance(payload, Mapping):
        raise InvalidRequestError(message, error="Request body must be a JSON object.")

    try:
        return schema.load(payload)
    except ValidationError as exc:
        raise InvalidRequestError(message, error=str(exc.messages)) from exc

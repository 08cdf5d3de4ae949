"""Decoding helpers shared by every resource parser."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_json(body: bytes | bytearray | str | Any) -> Any:
    """Decode a raw UTF-8 JSON body.

    Values that are already decoded (dicts, lists) pass through unchanged so
    adapters can be fed either transport bytes or fixtures.
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Response body is not valid UTF-8: {e}") from e
    if isinstance(body, str):
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Response body is not valid JSON: {e.msg}") from e
    return body


def _location(error: dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


def validate(model: type[ModelT], payload: Any, *, type_i: int | None = None) -> ModelT:
    """Validate a decoded JSON object into ``model``.

    Raises:
        DecodeError: Naming the first offending field and carrying the full
            pydantic error list.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}",
            type_i=type_i,
        )
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        first = errors[0] if errors else {}
        field = _location(first) or None
        if first.get("type") == "missing":
            message = f"{model.__name__}: missing required field '{field}'"
        else:
            message = f"{model.__name__}: invalid field '{field}': {first.get('msg', 'invalid value')}"
        raise DecodeError(message, field=field, type_i=type_i, errors=errors) from e

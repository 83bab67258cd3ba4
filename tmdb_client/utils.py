"""Serialization helpers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic_core import to_json as _to_json


def to_json(payload: Any) -> str:
    """Render a value as JSON indented by two spaces.

    Accepts pydantic models, dataclasses, and plain dicts/lists.

    Raises:
        PydanticSerializationError: If the value cannot be represented as JSON.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(indent=2)
    return _to_json(payload, indent=2).decode()

"""Object <-> JSON text helpers."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from cssforge.exceptions import SerializationError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def _to_plain(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    return obj


def to_json(obj: Any) -> str:
    """Return the compact JSON representation of ``obj``.

    Dataclasses and pydantic models are encoded as their fields, in field order.
    NaN and infinities are rejected since JSON has no spelling for them.
    """
    try:
        return json.dumps(
            _to_plain(obj), separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode {type(obj).__name__} as JSON") from exc


def from_json(cls: type[T], text: str) -> T:
    """Rebuild an instance of ``cls`` from JSON text.

    Object values are passed to ``cls`` positionally in the order they appear in
    the text, array items likewise, scalars as the single argument. Pydantic
    models get the same values matched to their fields in declaration order.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("json_decode_failed", target=cls.__name__, error=str(exc))
        raise SerializationError(f"Invalid JSON for {cls.__name__}") from exc

    if isinstance(data, dict):
        args = list(data.values())
    elif isinstance(data, list):
        args = data
    else:
        args = [data]

    if isinstance(cls, type) and issubclass(cls, BaseModel):
        if len(args) != len(cls.model_fields):
            raise SerializationError(
                f"Cannot build {cls.__name__} from {len(args)} positional value(s)"
            )
        try:
            return cls.model_validate(dict(zip(cls.model_fields, args, strict=True)))
        except ValidationError as exc:
            raise SerializationError(f"Invalid values for {cls.__name__}") from exc

    try:
        return cls(*args)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {cls.__name__} from {len(args)} positional value(s)"
        ) from exc

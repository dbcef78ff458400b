"""camelCase JSON mapping for the analysis records."""

from dataclasses import fields
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase JSON key."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def record_to_dict(record: Any) -> dict[str, Any]:
    """Flat dataclass -> dict with camelCase keys."""
    return {camel_case(f.name): getattr(record, f.name) for f in fields(record)}


@lru_cache(maxsize=None)
def _adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


def record_from_dict(cls: type[T], d: dict[str, Any]) -> T:
    """
    Build a flat dataclass from a dict.

    Accepts camelCase or snake_case keys. Missing keys fall back to the
    dataclass defaults; unknown keys are ignored. Values are checked
    against the field types, and a wrong-typed value raises ValueError.
    """
    if not isinstance(d, dict):
        raise ValueError(f"{cls.__name__} must be a JSON object, got {type(d).__name__}")

    kwargs = {}
    for f in fields(cls):
        key = camel_case(f.name)
        if key in d:
            kwargs[f.name] = d[key]
        elif f.name in d:
            kwargs[f.name] = d[f.name]

    try:
        return _adapter(cls).validate_python(kwargs)
    except ValidationError as e:
        raise ValueError(f"Invalid {cls.__name__}: {e}") from e

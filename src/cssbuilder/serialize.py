"""JSON serialization helpers for cssbuilder values."""

from __future__ import annotations

import json
from typing import Any

from .errors import SerializationError


def _public_attrs(value: Any) -> dict[str, Any]:
    attrs: dict[str, Any] = {}
    # __slots__ may be declared on any class in the MRO
    for klass in reversed(type(value).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and hasattr(value, name):
                attrs[name] = getattr(value, name)
    if hasattr(value, "__dict__"):
        for name, item in vars(value).items():
            if not name.startswith("_"):
                attrs[name] = item
    return attrs


def _has_attributes(value: Any) -> bool:
    if hasattr(value, "__dict__"):
        return True
    return any("__slots__" in klass.__dict__ for klass in type(value).__mro__[:-1])


def _default(value: Any) -> Any:
    # Instances of user classes become objects, even when they have no fields
    if not _has_attributes(value):
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    return _public_attrs(value)


def to_json(value: Any) -> str:
    """Convert value to a compact JSON string."""
    return json.dumps(value, separators=(",", ":"), default=_default)


def from_json(prototype: type | None, text: str) -> Any:
    """
    Parse JSON text and bind the result to the behavior of ``prototype``.

    A JSON object becomes an instance of ``prototype`` built without calling
    its ``__init__``; each key is set as an attribute. Any other JSON value is
    returned as parsed.

    Args:
        prototype: The class whose methods and properties the result gets
        text: A JSON document

    Returns:
        The decoded value
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(str(e)) from e

    if prototype is None or not isinstance(data, dict):
        return data

    obj = prototype.__new__(prototype)
    for key, item in data.items():
        try:
            setattr(obj, key, item)
        except AttributeError as e:
            raise SerializationError(f"cannot set {key!r} on {prototype.__name__}") from e
    return obj

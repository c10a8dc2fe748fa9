"""
Error serialization

Turns whatever was raised (or handed over as an error) into a
JSON-safe structure that can be placed in a log entry body.
"""

import traceback
from collections.abc import Mapping
from enum import Enum
from typing import Any


class _Undefined:
    """Marker for an absent value, distinct from None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

NULL_ERROR = "null error"


def _error_cause(error: BaseException):
    if error.__cause__ is not None:
        return error.__cause__
    if error.__context__ is not None and not error.__suppress_context__:
        return error.__context__
    return UNDEFINED


def _error_stack(error: BaseException):
    if error.__traceback__ is None:
        return UNDEFINED
    lines = traceback.format_exception(
        type(error), error, error.__traceback__, chain=False
    )
    return "".join(lines)


PRIMITIVES = (str, bytes, int, float, bool)


def _is_primitive(value: Any) -> bool:
    return isinstance(value, (Enum,) + PRIMITIVES)


def _primitive(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _is_keyed(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return hasattr(value, "__dict__") and not callable(value)


def _keyed_items(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    items = list(vars(value).items())
    if isinstance(value, (list, tuple)):
        items = [(str(i), item) for i, item in enumerate(value)] + items
    return items


def _keyed(items) -> dict:
    result = {}
    for key, val in items:
        serialized = serialize_error(val)
        if serialized is not UNDEFINED:
            result[str(key)] = serialized
    return result


def serialize_error(value: Any) -> Any:
    """
    Convert an arbitrary error value into a JSON-safe structure.

    Checks, in order:

    - exceptions become ``{"name", "stack", "cause"}``, recursing into the
      cause; ``stack`` and ``cause`` are left out when absent
    - ``UNDEFINED`` stays ``UNDEFINED`` (dropped from enclosing mappings)
    - ``None`` becomes ``"null error"``
    - strings, bytes, numbers and booleans (subclasses included) become
      ``str(value)``; enum members become ``str(member.value)``
    - mappings and plain objects with attributes become dicts of their
      serialized values
    - lists and tuples become lists of serialized values
    - anything else becomes ``str(value)``

    Keyed structures are checked before sequences, so a list or tuple
    subclass with a ``__dict__`` becomes a mapping of its indexes ("0",
    "1", ...) followed by its instance attributes.
    Cyclic structures are not supported.

    Args:
        value: The caught error or any other value

    Returns:
        JSON-safe value, or UNDEFINED
    """
    if isinstance(value, BaseException):
        return _keyed(
            [
                ("name", type(value).__name__),
                ("stack", _error_stack(value)),
                ("cause", _error_cause(value)),
            ]
        )

    if value is UNDEFINED:
        return UNDEFINED

    if value is None:
        return NULL_ERROR

    if _is_primitive(value):
        return _primitive(value)

    if _is_keyed(value):
        return _keyed(_keyed_items(value))

    if isinstance(value, (list, tuple)):
        return [
            None if item is UNDEFINED else item
            for item in map(serialize_error, value)
        ]

    return str(value)

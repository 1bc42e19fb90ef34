# topmark:header:start
#
#   project      : envexport
#   file         : kinds.py
#   file_relpath : src/envexport/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value kinds, emptiness, scalar rendering and type descriptions.

The encoder dispatches on a closed set of kinds:

- ``NUMBER``: ``int`` and ``float`` (including ``IntEnum``); ``bool`` is *not* a number.
- ``TEXT``: ``str`` and its subclasses (``StrEnum``...).
- ``RECORD``: dataclass instances.
- ``REFERENCE``: a null reference (``None``) at run time; statically, any optional,
  union or ``Any``-typed field whose referent is only known at run time.
- ``UNSUPPORTED``: everything else (collections, bytes, bools, callables, handles).

Type descriptions are what `UnsupportedTypeError` carries, e.g. ``list[str]``,
``tuple[str, str]`` or ``dict[str, int]``.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping, Sized
from enum import Enum
from typing import Any, Union, get_args, get_origin

_NONE_TYPE: type[None] = type(None)

# Textual spellings of annotations that leave the referent open.
_POLYMORPHIC_NAMES: frozenset[str] = frozenset({"Any", "typing.Any", "object"})


class ValueKind(str, Enum):
    """Closed set of kinds the encoder dispatches on."""

    NUMBER = "number"
    TEXT = "text"
    RECORD = "record"
    REFERENCE = "reference"
    UNSUPPORTED = "unsupported"


def is_record(value: object) -> bool:
    """Return True if ``value`` is a dataclass *instance*."""
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def is_record_type(annotation: object) -> bool:
    """Return True if ``annotation`` is a dataclass *type*."""
    return isinstance(annotation, type) and dataclasses.is_dataclass(annotation)


def classify(value: object) -> ValueKind:
    """Return the run-time kind of ``value``.

    Args:
        value (object): Any value reached while walking a record.

    Returns:
        ValueKind: The kind the encoder dispatches on.
    """
    if value is None:
        return ValueKind.REFERENCE
    # bool subclasses int but has no export rendering
    if isinstance(value, bool):
        return ValueKind.UNSUPPORTED
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if is_record(value):
        return ValueKind.RECORD
    return ValueKind.UNSUPPORTED


def is_empty_value(value: object) -> bool:
    """Return True if ``value`` is the empty value for its kind.

    Empty values are ``None``, ``False``, zero numbers, and sized values of
    length zero (text, bytes, collections). Records are never empty.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return not value
    if is_record(value):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def render_scalar(value: int | float | str) -> str:
    """Return the default textual rendering of a scalar.

    Enum subclasses of ``int`` and ``str`` render their underlying value, not
    the member name.
    """
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, int):
        return int.__repr__(value)
    return float.__repr__(value)


# --- Annotations ---


def _is_union(annotation: object) -> bool:
    origin: object = get_origin(annotation)
    return origin is Union or origin is types.UnionType


def strip_optional(annotation: object) -> object:
    """Remove ``None`` from an optional annotation.

    ``Optional[X]`` and ``X | None`` become ``X``; unions of several non-None
    members keep the remaining members. Unresolved (string) annotations are
    stripped textually.

    Args:
        annotation (object): A resolved annotation or its source text.

    Returns:
        object: The annotation without its ``None`` member.
    """
    if isinstance(annotation, str):
        text: str = annotation.strip()
        if text.startswith("Optional[") and text.endswith("]"):
            return text[len("Optional[") : -1].strip()
        parts: list[str] = [part.strip() for part in text.split("|")]
        if len(parts) > 1 and "None" in parts:
            return " | ".join(part for part in parts if part != "None")
        return text
    if _is_union(annotation):
        members: tuple[Any, ...] = tuple(arg for arg in get_args(annotation) if arg is not _NONE_TYPE)
        if len(members) == 1:
            return members[0]
        return Union[members]  # noqa: UP007
    return annotation


def _type_name(tp: Any) -> str:
    name: str | None = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None)
    if name is None:
        name = getattr(tp, "_name", None) or repr(tp)
    module: str | None = getattr(tp, "__module__", None)
    if module in (None, "builtins", "typing"):
        return name
    return f"{module}.{name}"


def format_type(annotation: object) -> str:
    """Return a textual description of a type annotation.

    Examples:
        ``list[str]``, ``dict[str, int]``, ``tuple[str, str]``,
        ``collections.abc.Callable[[int], str]``, ``str | None``.

    Args:
        annotation (object): A resolved annotation, or its source text.

    Returns:
        str: The description. Source text is returned unchanged.
    """
    if isinstance(annotation, str):
        return annotation
    if annotation is None or annotation is _NONE_TYPE:
        return "None"
    if annotation is Ellipsis:
        return "..."
    if annotation is Any:
        return "Any"
    if isinstance(annotation, (list, tuple)):
        return "[" + ", ".join(format_type(arg) for arg in annotation) + "]"
    if _is_union(annotation):
        return " | ".join(format_type(arg) for arg in get_args(annotation))
    origin: Any = get_origin(annotation)
    if origin is not None:
        args: tuple[Any, ...] = get_args(annotation)
        if not args:
            return _type_name(origin)
        return f"{_type_name(origin)}[{', '.join(format_type(arg) for arg in args)}]"
    if isinstance(annotation, type):
        return _type_name(annotation)
    return repr(annotation).removeprefix("typing.")


def _describes(annotation: object, value: object) -> bool:
    # bool subclasses int; an int or float annotation does not describe it
    if isinstance(value, bool) and annotation not in (bool, "bool"):
        return False
    if isinstance(annotation, str):
        return annotation not in _POLYMORPHIC_NAMES
    if annotation is Any or annotation is object or _is_union(annotation):
        return False
    target: object = get_origin(annotation) or annotation
    if not isinstance(target, type):
        return False
    try:
        return isinstance(value, target)
    except TypeError:
        return False


def _element_type(values: Any, container: str) -> str:
    names: set[str] = {_type_name(type(item)) for item in values}
    if len(names) == 1:
        return f"{container}[{names.pop()}]"
    return container


def infer_type(value: object) -> str:
    """Describe the type of ``value`` from its run-time contents.

    Containers are described one level deep: homogeneous lists/sets get their
    element type, tuples list every element type, dicts their key and value
    types. Mixed or empty containers are described by their bare type name.
    """
    container: str = _type_name(type(value))
    if isinstance(value, tuple):
        if not value:
            return f"{container}[()]"
        return f"{container}[{', '.join(_type_name(type(item)) for item in value)}]"
    if isinstance(value, (list, set, frozenset)):
        return _element_type(value, container)
    if isinstance(value, Mapping):
        keys: set[str] = {_type_name(type(key)) for key in value}
        values: set[str] = {_type_name(type(item)) for item in value.values()}
        if len(keys) == 1 and len(values) == 1:
            return f"{container}[{keys.pop()}, {values.pop()}]"
        return container
    return container


def describe_value(value: object, annotation: object = None) -> str:
    """Return the type description for an unsupported value.

    The declared annotation wins when it names the value's actual type (after
    removing ``None`` from optional annotations); otherwise the description is
    inferred from the value itself.

    Args:
        value (object): The unsupported value.
        annotation (object): Declared annotation of the field holding it, if any.

    Returns:
        str: A description such as ``list[str]``.
    """
    if annotation is not None:
        declared: object = strip_optional(annotation)
        if _describes(declared, value):
            return format_type(declared)
    return infer_type(value)


def classify_annotation(annotation: object) -> ValueKind:
    """Return the static kind of a field from its annotation.

    Optional, union and ``Any``-typed fields are references: the kind of their
    referent is only known at run time. Unresolved annotation text is treated
    the same way unless it names a builtin scalar.
    """
    if annotation is None or annotation is Any or annotation is object:
        return ValueKind.REFERENCE
    if isinstance(annotation, str):
        text: str = annotation.strip()
        if text in ("int", "float"):
            return ValueKind.NUMBER
        if text == "str":
            return ValueKind.TEXT
        return ValueKind.REFERENCE
    if _is_union(annotation):
        return ValueKind.REFERENCE
    target: object = get_origin(annotation) or annotation
    if not isinstance(target, type):
        return ValueKind.UNSUPPORTED
    if issubclass(target, bool):
        return ValueKind.UNSUPPORTED
    if issubclass(target, (int, float)):
        return ValueKind.NUMBER
    if issubclass(target, str):
        return ValueKind.TEXT
    if is_record_type(target):
        return ValueKind.RECORD
    return ValueKind.UNSUPPORTED

# topmark:header:start
#
#   project      : envexport
#   file         : test_kinds.py
#   file_relpath : tests/core/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for value kinds, emptiness, rendering and type descriptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, List, Optional, Union

from envexport.core.kinds import (
    ValueKind,
    classify,
    classify_annotation,
    describe_value,
    format_type,
    infer_type,
    is_empty_value,
    render_scalar,
    strip_optional,
)
from tests.conftest import parametrize
from tests.models import SA, Color, Level


@parametrize(
    ("value", "kind"),
    [
        (0, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        (Level.HIGH, ValueKind.NUMBER),
        ("", ValueKind.TEXT),
        (Color.RED, ValueKind.TEXT),
        (SA(), ValueKind.RECORD),
        (None, ValueKind.REFERENCE),
        (True, ValueKind.UNSUPPORTED),
        (b"x", ValueKind.UNSUPPORTED),
        ([], ValueKind.UNSUPPORTED),
        ({}, ValueKind.UNSUPPORTED),
        (SA, ValueKind.UNSUPPORTED),
        (len, ValueKind.UNSUPPORTED),
    ],
)
def test_classify(value: object, kind: ValueKind) -> None:
    """Run-time values map onto the closed set of kinds."""
    assert classify(value) is kind


@parametrize(
    ("value", "empty"),
    [
        (None, True),
        (0, True),
        (0.0, True),
        ("", True),
        (False, True),
        (b"", True),
        ([], True),
        ({}, True),
        ((), True),
        (1, False),
        (-0.5, False),
        ("x", False),
        (True, False),
        (["x"], False),
        (SA(), False),
    ],
)
def test_is_empty_value(value: object, empty: bool) -> None:
    """Zero numbers, empty sized values and None are empty; records never are."""
    assert is_empty_value(value) is empty


@parametrize(
    ("value", "text"),
    [
        (4711, "4711"),
        (-1, "-1"),
        (3.5, "3.5"),
        (100.0, "100.0"),
        (1e21, "1e+21"),
        ("hallo", "hallo"),
        (Color.RED, "red"),
        (Level.HIGH, "3"),
    ],
)
def test_render_scalar(value: Any, text: str) -> None:
    """Scalars use Python's default textual rendering of their value."""
    assert render_scalar(value) == text


@parametrize(
    ("annotation", "text"),
    [
        (list[str], "list[str]"),
        (List[str], "list[str]"),  # noqa: UP006
        (dict[str, int], "dict[str, int]"),
        (tuple[str, str], "tuple[str, str]"),
        (Optional[int], "int | None"),  # noqa: UP007
        (int | None, "int | None"),
        (Callable[[int], str], "collections.abc.Callable[[int], str]"),
        (SA, "tests.models.SA"),
        (str, "str"),
        (Any, "Any"),
        ("list[str]", "list[str]"),
    ],
)
def test_format_type(annotation: object, text: str) -> None:
    """Annotations render without the ``typing.`` prefix."""
    assert format_type(annotation) == text


@parametrize(
    ("annotation", "stripped"),
    [
        (Optional[int], int),  # noqa: UP007
        (int | None, int),
        (list[str] | None, list[str]),
        (Union[int, str, None], Union[int, str]),  # noqa: UP007
        (int, int),
        ("Optional[int]", "int"),
        ("list[str] | None", "list[str]"),
        ("None | str", "str"),
        ("str", "str"),
    ],
)
def test_strip_optional(annotation: object, stripped: object) -> None:
    """``None`` is removed from optional annotations, resolved or textual."""
    assert strip_optional(annotation) == stripped


@parametrize(
    ("value", "text"),
    [
        (["a", "b"], "list[str]"),
        ([1, "a"], "list"),
        ([], "list"),
        (("a", 1), "tuple[str, int]"),
        ((), "tuple[()]"),
        ({"a": 1}, "dict[str, int]"),
        ({"a": 1, 2: 1}, "dict"),
        ({1.5}, "set[float]"),
        (b"x", "bytes"),
        (True, "bool"),
    ],
)
def test_infer_type(value: object, text: str) -> None:
    """Run-time descriptions look one level into containers."""
    assert infer_type(value) == text


def test_infer_type_terminates_on_self_containing_list() -> None:
    """Only one level of elements is inspected."""
    items: list[Any] = []
    items.append(items)
    assert infer_type(items) == "list[list]"


def test_describe_value_prefers_matching_annotation() -> None:
    """The declared annotation is used when it describes the value."""
    assert describe_value([], list[str]) == "list[str]"
    assert describe_value(["a"], Optional[list[str]]) == "list[str]"  # noqa: UP007
    assert describe_value(("a", "b"), "tuple[str, str]") == "tuple[str, str]"


def test_describe_value_falls_back_to_value() -> None:
    """Mismatching, polymorphic or missing annotations describe the value itself."""
    assert describe_value(("a",), list[str]) == "tuple[str]"
    assert describe_value([1], Any) == "list[int]"
    assert describe_value([1], Union[list[int], str]) == "list[int]"  # noqa: UP007
    assert describe_value({"a": "b"}) == "dict[str, str]"


@parametrize(
    ("annotation", "kind"),
    [
        (int, ValueKind.NUMBER),
        (float, ValueKind.NUMBER),
        (Level, ValueKind.NUMBER),
        (str, ValueKind.TEXT),
        (Color, ValueKind.TEXT),
        (SA, ValueKind.RECORD),
        (Optional[SA], ValueKind.REFERENCE),  # noqa: UP007
        (Any, ValueKind.REFERENCE),
        (None, ValueKind.REFERENCE),
        (bool, ValueKind.UNSUPPORTED),
        (list[str], ValueKind.UNSUPPORTED),
        (dict[str, int], ValueKind.UNSUPPORTED),
        ("int", ValueKind.NUMBER),
        ("str", ValueKind.TEXT),
        ("SomethingLocal", ValueKind.REFERENCE),
    ],
)
def test_classify_annotation(annotation: object, kind: ValueKind) -> None:
    """Static kinds follow the run-time kinds; open annotations are references."""
    assert classify_annotation(annotation) is kind

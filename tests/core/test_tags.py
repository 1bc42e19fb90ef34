# topmark:header:start
#
#   project      : envexport
#   file         : test_tags.py
#   file_relpath : tests/core/test_tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for export tag parsing."""

from __future__ import annotations

from envexport.core.tags import EMPTY_TAG, ParsedTag, parse_tag
from tests.conftest import parametrize


@parametrize(
    ("raw", "name", "options", "omit_empty"),
    [
        ("MYVAR", "MYVAR", (), False),
        ("MYVAR,omitempty", "MYVAR", ("omitempty",), True),
        (",omitempty", "", ("omitempty",), True),
        ("X,foo,omitempty", "X", ("foo", "omitempty"), True),
        ("X,foo", "X", ("foo",), False),
        ("X,,omitempty,", "X", ("omitempty",), True),
        ("X,", "X", (), False),
        ("omitempty", "omitempty", (), False),
    ],
)
def test_parse_tag(raw: str, name: str, options: tuple[str, ...], omit_empty: bool) -> None:
    """The first segment is the name; later segments are options."""
    tag: ParsedTag = parse_tag(raw)
    assert tag.name == name
    assert tag.options == options
    assert tag.omit_empty is omit_empty


def test_missing_tag_is_empty() -> None:
    """``None`` and ``""`` both parse to the empty tag."""
    assert parse_tag(None) is EMPTY_TAG
    assert parse_tag("") is EMPTY_TAG
    assert EMPTY_TAG.name == ""
    assert not EMPTY_TAG.omit_empty


def test_unknown_options_are_inert() -> None:
    """Unknown options are kept but do not enable omitempty."""
    tag: ParsedTag = parse_tag("X,string,inline")
    assert tag.has_option("string")
    assert tag.has_option("inline")
    assert not tag.omit_empty

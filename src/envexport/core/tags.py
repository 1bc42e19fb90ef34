# topmark:header:start
#
#   project      : envexport
#   file         : tags.py
#   file_relpath : src/envexport/core/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing of export tags.

A tag is the comma-separated string stored in a dataclass field's metadata:

    name[,option[,option...]]

The first segment is the declared variable name (empty means "derive the name
from the enclosing record"). Only the ``omitempty`` option has a meaning; any
other token is kept but ignored by the encoder.
"""

from __future__ import annotations

from dataclasses import dataclass

from envexport.constants import OPTION_OMITEMPTY, TAG_SEPARATOR


@dataclass(frozen=True)
class ParsedTag:
    """Declared name and option tokens of a single export tag.

    Attributes:
        name (str): Declared variable name, or ``""`` when the tag does not declare one.
        options (tuple[str, ...]): Option tokens following the first comma, in order.
    """

    name: str = ""
    options: tuple[str, ...] = ()

    def has_option(self, option: str) -> bool:
        """Return True if ``option`` appears among the tag's option tokens."""
        return option in self.options

    @property
    def omit_empty(self) -> bool:
        """Whether empty values of the field are suppressed."""
        return self.has_option(OPTION_OMITEMPTY)


EMPTY_TAG: ParsedTag = ParsedTag()


def parse_tag(tag: str | None) -> ParsedTag:
    """Split an export tag into its declared name and options.

    Args:
        tag (str | None): Raw tag string, e.g. ``"MYVAR,omitempty"`` or ``",omitempty"``.
            ``None`` and ``""`` both mean "no tag".

    Returns:
        ParsedTag: The parsed tag. Empty option segments are dropped.
    """
    if not tag:
        return EMPTY_TAG
    name, sep, rest = tag.partition(TAG_SEPARATOR)
    if not sep:
        return ParsedTag(name=name)
    options: tuple[str, ...] = tuple(token for token in rest.split(TAG_SEPARATOR) if token)
    return ParsedTag(name=name, options=options)

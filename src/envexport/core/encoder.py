# topmark:header:start
#
#   project      : envexport
#   file         : encoder.py
#   file_relpath : src/envexport/core/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encode records into shell ``export`` statements.

The encoder walks a record depth-first in field declaration order and emits one
line per exported scalar:

    export NAME='value'

Naming:
    - A field whose tag declares a name is exported under that name, at any depth.
    - An untagged field inside a named record is exported as ``PARENT_FieldName``.
    - An untagged field with no named parent is not exported. Nested records with
      an empty name pass the empty name on, so only explicitly named fields below
      them are exported.

References:
    ``None`` is a null reference and exports nothing. Any other value held by an
    optional or polymorphic field is visited under the field's own name and
    omit-empty flag.

Cycles:
    Every record is visited at most once per encode call (by identity), which
    bounds the walk on self-referencing record graphs.

Errors:
    A reachable field of unsupported type (collections, bytes, bools, callables...)
    aborts the encode with `UnsupportedTypeError`. Unreachable unsupported fields
    (empty name, or empty value with ``omitempty``) are skipped silently.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from envexport.config.logging import get_logger
from envexport.constants import ENV_TAG_KEY, EXPORT_LINE_TEMPLATE, OUTPUT_ENCODING
from envexport.core.errors import UnsupportedTypeError
from envexport.core.fields import effective_name, record_fields
from envexport.core.kinds import (
    ValueKind,
    classify,
    describe_value,
    is_empty_value,
    render_scalar,
)

if TYPE_CHECKING:
    from envexport.config.logging import EnvExportLogger
    from envexport.core.fields import FieldDescriptor

logger: EnvExportLogger = get_logger(__name__)


class EncodeState:
    """Mutable state of a single encode call.

    Attributes:
        tag_key (str): Metadata key holding the export tags.
        lines (list[str]): Emitted export lines, in order.
        visited (set[int]): Identities of the records visited so far.
    """

    tag_key: str
    lines: list[str]
    visited: set[int]

    def __init__(self, *, tag_key: str = ENV_TAG_KEY) -> None:
        self.tag_key = tag_key
        self.lines = []
        self.visited = set()

    def getvalue(self) -> str:
        """Return the emitted text."""
        return "".join(self.lines)

    def emit(self, name: str, value: int | float | str) -> None:
        """Append one export line."""
        rendered: str = render_scalar(value)
        logger.trace("export %s=%r", name, rendered)
        self.lines.append(EXPORT_LINE_TEMPLATE.format(name=name, value=rendered))

    def visit(
        self,
        value: object,
        name: str,
        omit_empty: bool,
        annotation: object = None,
    ) -> None:
        """Visit ``value`` under the effective name ``name``.

        Args:
            value (object): The value to encode.
            name (str): Effective variable name (``""`` when the value is unreachable).
            omit_empty (bool): Whether an empty ``value`` is suppressed.
            annotation (object): Declared annotation of the field holding ``value``,
                used to describe unsupported types.

        Raises:
            UnsupportedTypeError: If a reachable field holds an unsupported value.
        """
        kind: ValueKind = classify(value)

        if kind is ValueKind.NUMBER or kind is ValueKind.TEXT:
            if name and not (omit_empty and is_empty_value(value)):
                self.emit(name, value)  # type: ignore[arg-type]
        elif kind is ValueKind.REFERENCE:
            # Only null references classify as REFERENCE at run time; non-null
            # referents are visited directly under the holder's name and flag.
            return
        elif kind is ValueKind.RECORD:
            self.visit_record(value, name)
        elif name and not (omit_empty and is_empty_value(value)):
            raise UnsupportedTypeError(describe_value(value, annotation))
        else:
            logger.debug("Skipping unreachable %s value", type(value).__qualname__)

    def visit_record(self, record: object, name: str) -> None:
        """Visit the fields of ``record`` in declaration order.

        Args:
            record (object): A dataclass instance.
            name (str): Effective name of the record itself.

        Raises:
            UnsupportedTypeError: If a reachable field holds an unsupported value. The
                error records the identifier of every field it propagates out of.
        """
        identity: int = id(record)
        if identity in self.visited:
            logger.debug("Skipping already visited %s record", type(record).__qualname__)
            return
        self.visited.add(identity)

        fields: tuple[FieldDescriptor, ...] = record_fields(record, tag_key=self.tag_key)
        for field in fields:
            # Unassigned init=False fields are null references
            try:
                self.visit(
                    getattr(record, field.name, None),
                    effective_name(name, field),
                    field.omit_empty,
                    field.annotation,
                )
            except UnsupportedTypeError as exc:
                exc.add_field(field.name)
                raise


class EnvEncoder:
    """Reusable encoder for shell ``export`` statements.

    Every call to `encode` starts from a fresh `EncodeState`, so one encoder can
    be shared freely, including across threads.

    Args:
        tag_key (str): Dataclass metadata key holding the export tags.
    """

    tag_key: str

    def __init__(self, *, tag_key: str = ENV_TAG_KEY) -> None:
        self.tag_key = tag_key

    def encode_text(self, value: object) -> str:
        """Encode ``value`` and return the export statements as text.

        Raises:
            UnsupportedTypeError: If a reachable field holds an unsupported value.
        """
        state = EncodeState(tag_key=self.tag_key)
        state.visit(value, "", False)
        logger.debug("Encoded %d export line(s)", len(state.lines))
        return state.getvalue()

    def encode(self, value: object) -> bytes:
        """Encode ``value`` into UTF-8 export statements.

        Args:
            value (object): Usually a dataclass instance. Scalars and other values at
                the top level have no name and encode to nothing.

        Returns:
            bytes: Zero or more ``export NAME='value'`` lines.

        Raises:
            UnsupportedTypeError: If a reachable field holds an unsupported value.
                Nothing is returned in that case, not even the lines emitted before
                the failing field.
        """
        return self.encode_text(value).encode(OUTPUT_ENCODING)


def marshal(value: object, *, tag_key: str = ENV_TAG_KEY) -> bytes:
    """Encode ``value`` into UTF-8 shell ``export`` statements.

    Args:
        value (object): The record to encode.
        tag_key (str): Dataclass metadata key holding the export tags.

    Returns:
        bytes: The export statements.

    Raises:
        UnsupportedTypeError: If a reachable field holds an unsupported value.
    """
    return EnvEncoder(tag_key=tag_key).encode(value)


def dumps(value: object, *, tag_key: str = ENV_TAG_KEY) -> str:
    """Encode ``value`` into shell ``export`` statements and return them as text.

    Raises:
        UnsupportedTypeError: If a reachable field holds an unsupported value.
    """
    return EnvEncoder(tag_key=tag_key).encode_text(value)


def dump(value: object, fp: IO[str], *, tag_key: str = ENV_TAG_KEY) -> None:
    """Encode ``value`` and write the export statements to the text stream ``fp``.

    Nothing is written when encoding fails.

    Raises:
        UnsupportedTypeError: If a reachable field holds an unsupported value.
    """
    fp.write(dumps(value, tag_key=tag_key))

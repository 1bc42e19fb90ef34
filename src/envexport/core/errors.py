# topmark:header:start
#
#   project      : envexport
#   file         : errors.py
#   file_relpath : src/envexport/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the envexport encoder and record builder.

Usage:
    Catch `EnvExportError` to handle any library failure, or `UnsupportedTypeError`
    to handle reachable fields whose type cannot be exported.

Comparison:
    `UnsupportedTypeError` compares equal to any other instance carrying the same
    type description, regardless of the field breadcrumb collected while the error
    propagated out of nested records:

    ```python
    try:
        marshal(settings)
    except UnsupportedTypeError as exc:
        assert exc == UnsupportedTypeError("list[str]")
        print(exc.field_path)  # ("S1", "A")
    ```
"""

from __future__ import annotations


class EnvExportError(Exception):
    """Base class for all envexport errors."""


class UnsupportedTypeError(EnvExportError):
    """A reachable field holds a value whose type cannot be exported.

    Only scalars (numbers and text), records and references to them are supported.

    Attributes:
        type_name (str): Textual description of the offending type (e.g. ``list[str]``).
        field_path (tuple[str, ...]): Field identifiers from the outermost record down
            to the failing field.
    """

    type_name: str
    field_path: tuple[str, ...]

    def __init__(self, type_name: str) -> None:
        super().__init__(type_name)
        self.type_name = type_name
        self.field_path = ()

    def add_field(self, field_name: str) -> None:
        """Record that the error propagated out of the field ``field_name``.

        Called once per enclosing record level, innermost first, so the resulting
        path reads from the outermost field to the innermost one.

        Args:
            field_name (str): Static identifier of the field being visited.
        """
        self.field_path = (field_name, *self.field_path)

    def __str__(self) -> str:
        trail: str = "".join(f"visiting {name}: " for name in self.field_path)
        return f"{trail}unsupported type: {self.type_name}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnsupportedTypeError):
            return NotImplemented
        return self.type_name == other.type_name

    def __hash__(self) -> int:
        return hash((UnsupportedTypeError, self.type_name))


class RecordBuildError(EnvExportError):
    """A record could not be built from a mapping of field values.

    Attributes:
        path (str): Dotted path of the offending field (empty for the record itself).
        reason (str): Human-readable description of the problem.
    """

    path: str
    reason: str

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}" if path else reason)
        self.path = path
        self.reason = reason

# topmark:header:start
#
#   project      : envexport
#   file         : loaders.py
#   file_relpath : src/envexport/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML value documents.

A values document provides the field values of the record to export. Top-level
keys are field identifiers of the root record; tables hold the values of nested
records. Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from envexport.config.logging import get_logger
from envexport.core.errors import EnvExportError

if TYPE_CHECKING:
    from pathlib import Path

    from envexport.config.logging import EnvExportLogger

logger: EnvExportLogger = get_logger(__name__)

ValuesTable = dict[str, Any]


class ValuesParseError(EnvExportError):
    """A values document is not valid TOML.

    Attributes:
        source (str): Where the document came from (a path or ``"<stdin>"``).
    """

    source: str

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


def parse_values_toml(text: str, *, source: str = "<string>") -> ValuesTable:
    """Parse a TOML values document into plain Python containers.

    Args:
        text (str): The TOML document.
        source (str): Description of the document origin, used in error messages.

    Returns:
        ValuesTable: The top-level table, with all tomlkit items unwrapped.

    Raises:
        ValuesParseError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", source, exc)
        raise ValuesParseError(source, str(exc)) from exc
    data: ValuesTable = doc.unwrap()
    logger.debug("Loaded %d top-level value(s) from %s", len(data), source)
    return data


def load_values_toml(path: Path) -> ValuesTable:
    """Load and parse a TOML values document from the filesystem.

    Encoding is assumed to be UTF-8.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        ValuesTable: The parsed values.

    Raises:
        OSError: If the file cannot be read.
        ValuesParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    return parse_values_toml(text, source=str(path))

# topmark:header:start
#
#   project      : envexport
#   file         : constants.py
#   file_relpath : src/envexport/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    ENVEXPORT_VERSION: str = get_version("envexport")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    ENVEXPORT_VERSION = "0.0.0"

# Dataclass field metadata key holding the export tag:
ENV_TAG_KEY: Final[str] = "env"

OPTION_OMITEMPTY: Final[str] = "omitempty"

TAG_SEPARATOR: Final[str] = ","
NAME_SEPARATOR: Final[str] = "_"

EXPORT_LINE_TEMPLATE: Final[str] = "export {name}='{value}'\n"

OUTPUT_ENCODING: Final[str] = "utf-8"

LOG_LEVEL_ENV_VAR: Final[str] = "ENVEXPORT_LOG_LEVEL"

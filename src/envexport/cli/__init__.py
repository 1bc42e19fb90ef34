# topmark:header:start
#
#   project      : envexport
#   file         : __init__.py
#   file_relpath : src/envexport/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport CLI package.

This package groups all Click command definitions and supporting utilities
for the envexport command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        envexport = "envexport.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time

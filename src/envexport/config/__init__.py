# topmark:header:start
#
#   project      : envexport
#   file         : __init__.py
#   file_relpath : src/envexport/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup and TOML value loading for envexport."""

from __future__ import annotations

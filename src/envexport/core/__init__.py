# topmark:header:start
#
#   project      : envexport
#   file         : __init__.py
#   file_relpath : src/envexport/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core encoder, record introspection and record builder."""

from __future__ import annotations

# topmark:header:start
#
#   project      : envexport
#   file         : __init__.py
#   file_relpath : src/envexport/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the envexport CLI."""

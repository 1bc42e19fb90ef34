# topmark:header:start
#
#   project      : envexport
#   file         : __main__.py
#   file_relpath : src/envexport/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running envexport via ``python -m envexport``.

Delegates to :func:`envexport.cli.main.cli`, the same entry point as the
``envexport`` console script.

Examples:
    Export the defaults of a settings record::

        python -m envexport export myapp.settings:Settings
"""

from __future__ import annotations

from envexport.cli.main import cli

if __name__ == "__main__":
    cli()

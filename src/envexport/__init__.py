# topmark:header:start
#
#   project      : envexport
#   file         : __init__.py
#   file_relpath : src/envexport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""envexport package.

envexport turns dataclass records into shell ``export NAME='value'`` statements,
driven by export tags in the field metadata. It exposes a small typed API and a
CLI.

Example:
    ```python
    from dataclasses import dataclass

    from envexport import env_field, marshal


    @dataclass
    class Settings:
        greeting: str = env_field("MYVAR")
        port: int = env_field("PORT,omitempty", default=0)


    assert marshal(Settings(greeting="hallo")) == b"export MYVAR='hallo'\\n"
    ```
"""

from __future__ import annotations

from envexport.core.encoder import EnvEncoder, dump, dumps, marshal
from envexport.core.errors import EnvExportError, RecordBuildError, UnsupportedTypeError
from envexport.core.fields import env_field

__all__ = [
    "EnvEncoder",
    "EnvExportError",
    "RecordBuildError",
    "UnsupportedTypeError",
    "dump",
    "dumps",
    "env_field",
    "marshal",
]

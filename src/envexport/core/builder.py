# topmark:header:start
#
#   project      : envexport
#   file         : builder.py
#   file_relpath : src/envexport/core/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build record instances from plain mappings.

Used by the CLI to turn a TOML values document into the record to encode. Keys
are field identifiers (not variable names); nested tables build nested records:

```toml
MYVAR = "hallo"

[S1]
A = "welt"
```

Values of non-record fields are passed through unchanged, so type errors in the
document surface later as `UnsupportedTypeError` when a collection ends up in a
reachable field.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from envexport.config.logging import get_logger
from envexport.core.errors import RecordBuildError
from envexport.core.fields import record_fields
from envexport.core.kinds import is_record_type, strip_optional

if TYPE_CHECKING:
    from envexport.config.logging import EnvExportLogger

logger: EnvExportLogger = get_logger(__name__)


def build_record(record_class: type, data: Mapping[str, Any], *, path: str = "") -> Any:
    """Construct an instance of ``record_class`` from ``data``.

    Args:
        record_class (type): The dataclass to instantiate.
        data (Mapping[str, Any]): Field values keyed by field identifier. Fields not
            present keep their declared defaults.
        path (str): Dotted path of this record inside the root record (for errors).

    Returns:
        Any: The new record instance.

    Raises:
        RecordBuildError: If ``record_class`` is not a dataclass, ``data`` contains
            unknown keys or is not a mapping, a record-typed field is given a
            non-table value, or a required field is missing.
    """
    if not is_record_type(record_class):
        raise RecordBuildError(path, f"not a dataclass: {record_class!r}")
    if not isinstance(data, Mapping):
        raise RecordBuildError(path, f"expected a table, got {type(data).__qualname__}")

    init_names: set[str] = {f.name for f in dataclasses.fields(record_class) if f.init}
    unknown: list[str] = sorted(str(key) for key in data if key not in init_names)
    if unknown:
        raise RecordBuildError(path, f"unknown field(s): {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for field in record_fields(record_class):
        if field.name not in data:
            continue
        value: Any = data[field.name]
        field_path: str = f"{path}.{field.name}" if path else field.name
        target: object = strip_optional(field.annotation)
        if is_record_type(target):
            assert isinstance(target, type)
            if isinstance(value, Mapping):
                value = build_record(target, value, path=field_path)
            elif value is not None and not isinstance(value, target):
                raise RecordBuildError(
                    field_path, f"expected a table, got {type(value).__qualname__}"
                )
        kwargs[field.name] = value

    try:
        record: Any = record_class(**kwargs)
    except TypeError as exc:
        # Missing required fields
        raise RecordBuildError(path, str(exc)) from exc
    logger.debug("Built %s from %d value(s)", record_class.__qualname__, len(kwargs))
    return record

# topmark:header:start
#
#   project      : envexport
#   file         : fields.py
#   file_relpath : src/envexport/core/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record shape introspection.

Records are dataclasses. Each field may carry an export tag in its metadata under
the tag key (``"env"`` by default):

```python
from dataclasses import dataclass, field

from envexport import env_field


@dataclass
class Database:
    host: str = env_field("DB_HOST")
    port: int = env_field("DB_PORT,omitempty", default=0)
    user: str = field(default="", metadata={"env": ""})
```

The shape of a record class is computed once per class and tag key and cached.

The module also provides a *static* walk over a record type (`iter_exported_names`)
that lists every variable the type can export, using the same naming rules as
the encoder.
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from envexport.config.logging import get_logger
from envexport.constants import ENV_TAG_KEY, NAME_SEPARATOR
from envexport.core.kinds import (
    ValueKind,
    classify_annotation,
    format_type,
    is_record_type,
    strip_optional,
)
from envexport.core.tags import ParsedTag, parse_tag

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from envexport.config.logging import EnvExportLogger

logger: EnvExportLogger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one record field.

    Attributes:
        name (str): The field identifier as declared in the record class.
        annotation (object): The resolved annotation, the annotation source text when it
            cannot be resolved, or ``None`` when the field has no annotation.
        tag (ParsedTag): The parsed export tag.
        kind (ValueKind): Static kind derived from the annotation.
    """

    name: str
    annotation: object
    tag: ParsedTag
    kind: ValueKind

    @property
    def declared_name(self) -> str:
        """Variable name declared by the tag (``""`` when none)."""
        return self.tag.name

    @property
    def omit_empty(self) -> bool:
        """Whether the tag requests omitting empty values."""
        return self.tag.omit_empty


def effective_name(parent: str, field: FieldDescriptor) -> str:
    """Return the variable name a field is exported under.

    An explicitly declared name always wins, regardless of nesting. Otherwise the
    name is derived as ``parent_FieldIdentifier`` inside a named parent, and stays
    empty (not exported) when the parent has no name either.

    Args:
        parent (str): Effective name of the enclosing record (``""`` at top level).
        field (FieldDescriptor): The field being named.

    Returns:
        str: The effective variable name, possibly empty.
    """
    if field.declared_name:
        return field.declared_name
    if parent:
        return f"{parent}{NAME_SEPARATOR}{field.name}"
    return ""


def env_field(tag: str = "", *, tag_key: str = ENV_TAG_KEY, **field_kwargs: Any) -> Any:
    """Declare a dataclass field carrying an export tag.

    Thin wrapper around `dataclasses.field` that stores ``tag`` in the field
    metadata. Other metadata passed via ``metadata=`` is preserved.

    Args:
        tag (str): The export tag, e.g. ``"MYVAR"``, ``"MYVAR,omitempty"`` or ``",omitempty"``.
        tag_key (str): Metadata key to store the tag under.
        **field_kwargs (Any): Forwarded to `dataclasses.field` (``default``,
            ``default_factory``, ``repr``...).

    Returns:
        Any: The `dataclasses.Field` object (typed ``Any`` so it can be assigned
            as a default value in the class body).
    """
    metadata: dict[str, Any] = dict(field_kwargs.pop("metadata", None) or {})
    metadata[tag_key] = tag
    return dataclasses.field(metadata=metadata, **field_kwargs)


def _resolve_annotations(record_class: type) -> Mapping[str, Any]:
    try:
        return typing.get_type_hints(record_class)
    except (NameError, TypeError) as exc:
        # Forward references to names not visible from the class module
        logger.debug("Cannot resolve annotations of %s: %s", record_class.__qualname__, exc)
        return {}


@lru_cache(maxsize=256)
def _record_fields_for_class(record_class: type, tag_key: str) -> tuple[FieldDescriptor, ...]:
    hints: Mapping[str, Any] = _resolve_annotations(record_class)
    descriptors: list[FieldDescriptor] = []
    for field in dataclasses.fields(record_class):
        annotation: object = hints.get(field.name, field.type)
        raw_tag: object = field.metadata.get(tag_key)
        tag: ParsedTag = parse_tag(raw_tag if isinstance(raw_tag, str) else None)
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                annotation=annotation,
                tag=tag,
                kind=classify_annotation(annotation),
            )
        )
    logger.trace("Computed %d field descriptors for %s", len(descriptors), record_class.__qualname__)
    return tuple(descriptors)


def record_fields(record: object, *, tag_key: str = ENV_TAG_KEY) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of a record instance or record class.

    Args:
        record (object): A dataclass instance or dataclass type.
        tag_key (str): Metadata key holding the export tag.

    Returns:
        tuple[FieldDescriptor, ...]: Descriptors in declaration order.

    Raises:
        TypeError: If ``record`` is not a dataclass instance or type.
    """
    record_class: object = record if isinstance(record, type) else type(record)
    if not is_record_type(record_class):
        raise TypeError(f"Not a dataclass: {record_class!r}")
    assert isinstance(record_class, type)
    return _record_fields_for_class(record_class, tag_key)


def _is_supported(annotation: object) -> bool:
    """Return True unless a set value of this annotation would be rejected by the encoder.

    Optional wrappers are looked through: ``list[str] | None`` is unsupported once
    it holds a list. Open annotations (``Any``, multi-member unions) stay supported
    because only their run-time value decides.
    """
    return classify_annotation(strip_optional(annotation)) is not ValueKind.UNSUPPORTED


@dataclass(frozen=True)
class ExportedName:
    """One variable a record type can export.

    Attributes:
        path (str): Dotted path of field identifiers from the root record.
        name (str): The effective variable name.
        type_text (str): Description of the field's declared type.
        omit_empty (bool): Whether empty values are suppressed.
        supported (bool): False when the declared type would be rejected at encode time.
    """

    path: str
    name: str
    type_text: str
    omit_empty: bool
    supported: bool = True


def iter_exported_names(
    record_class: type,
    *,
    tag_key: str = ENV_TAG_KEY,
) -> Iterator[ExportedName]:
    """Yield every variable a record type can export, in declaration order.

    Nested record types are followed (also through ``Optional[...]``) with the same
    naming rules as the encoder. A record type already on the current branch is
    not followed again, so recursive types terminate. Fields whose name resolves
    to ``""`` are unreachable and not yielded.

    Args:
        record_class (type): A dataclass type.
        tag_key (str): Metadata key holding the export tag.

    Yields:
        ExportedName: One entry per reachable scalar, reference or unsupported field.
    """
    yield from _walk_type(record_class, parent="", prefix="", tag_key=tag_key, branch=())


def _walk_type(
    record_class: type,
    *,
    parent: str,
    prefix: str,
    tag_key: str,
    branch: tuple[type, ...],
) -> Iterator[ExportedName]:
    branch = (*branch, record_class)
    for field in record_fields(record_class, tag_key=tag_key):
        name: str = effective_name(parent, field)
        path: str = f"{prefix}{field.name}"
        target: object = strip_optional(field.annotation)
        if is_record_type(target):
            assert isinstance(target, type)
            if target in branch:
                logger.debug("Not following recursive record type at %s", path)
                continue
            yield from _walk_type(
                target, parent=name, prefix=f"{path}.", tag_key=tag_key, branch=branch
            )
            continue
        if not name:
            continue
        yield ExportedName(
            path=path,
            name=name,
            type_text=format_type(field.annotation),
            omit_empty=field.omit_empty,
            supported=_is_supported(field.annotation),
        )

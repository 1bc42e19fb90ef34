# topmark:header:start
#
#   project      : envexport
#   file         : models.py
#   file_relpath : tests/models.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record dataclasses shared by the envexport test suite.

The classes live at module level so their annotations resolve through
`typing.get_type_hints`, and so the CLI tests can reference them as
``tests.models:ClassName``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from envexport import env_field


@dataclass
class Simple:
    """Two tagged scalars and one untagged field."""

    A: str = env_field("MYVAR", default="")
    B: int = env_field("B", default=0)
    Ignored: int = 0


@dataclass
class SimpleOmitEmpty:
    """Tagged scalars that are suppressed when empty."""

    A: str = env_field("MYVAR,omitempty", default="")
    B: int = env_field("B,omitempty", default=0)
    Ignored: int = 42


@dataclass
class SimpleOptional:
    """Optional (reference) fields tagged like `Simple`."""

    A: str | None = env_field("MYVAR", default=None)
    B: int | None = env_field("B", default=None)
    Ignored: int = 42


@dataclass
class OptionalOmitEmpty:
    """Optional field whose omit-empty flag applies to the referent."""

    B: int | None = env_field("B,omitempty", default=None)


@dataclass
class SA:
    """Nested record with an explicit, a derived and an omit-empty field."""

    A: str = env_field("MYVAR", default="")
    C: str = ""
    D: int = env_field(",omitempty", default=0)


@dataclass
class SB:
    """Nested record with an explicit name."""

    B: int = env_field("B", default=0)


@dataclass
class SSB:
    """Record wrapping `SB` in an untagged field."""

    S: SB = field(default_factory=SB)


@dataclass
class MultiLayered:
    """Two named nested records and one untagged field."""

    S1: SA = env_field("S1", default_factory=SA)
    S2: SSB = env_field("S2", default_factory=SSB)
    Ignored: int = 42


@dataclass
class UntaggedNested:
    """Nested record without a name: only explicit names below it are exported."""

    Inner: SA = field(default_factory=SA)


@dataclass
class WithList:
    """Tagged list field."""

    A: list[str] = env_field("MYSLICE", default_factory=list)


@dataclass
class WithListOmitEmpty:
    """Tagged list field suppressed when empty."""

    A: list[str] = env_field("MYSLICE,omitempty", default_factory=list)


@dataclass
class WithTuple:
    """Tagged fixed-size tuple field."""

    A: tuple[str, str] = env_field("MYARR", default=("", ""))


@dataclass
class WithDict:
    """Tagged mapping field."""

    A: dict[str, int] = env_field("MYMAP", default_factory=dict)


@dataclass
class WithCallable:
    """Tagged callable (handle) field."""

    A: Callable[[], None] | None = env_field("MYFUNC", default=None)


@dataclass
class WithBool:
    """Tagged bool field."""

    FLAG: bool = env_field("FLAG", default=True)


@dataclass
class IgnoredUnsupported:
    """Untagged unsupported field next to a tagged scalar."""

    items: list[str] = field(default_factory=lambda: ["x"])
    name: str = env_field("NAME", default="n")


@dataclass
class NestedUnsupported:
    """Unsupported field two levels down."""

    outer: WithList = env_field("OUTER", default_factory=WithList)


@dataclass
class PartialFailure:
    """A valid field followed by a failing one."""

    ok: str = env_field("OK", default="x")
    bad: list[str] = env_field("BAD", default_factory=lambda: ["y"])


@dataclass
class Node:
    """Linked node; `next` may point back to an ancestor."""

    label: str = ""
    next: Node | None = None


@dataclass
class Graph:
    """Named root of a node chain."""

    head: Node = env_field("G", default_factory=Node)


@dataclass
class Leaf:
    """Record with a single untagged number."""

    v: int = 0


@dataclass
class Pair:
    """Two named fields that may share one `Leaf` instance."""

    first: Leaf = env_field("FIRST", default_factory=Leaf)
    second: Leaf = env_field("SECOND", default_factory=Leaf)


@dataclass
class Holder:
    """Polymorphic holder; the referent decides the kind at run time."""

    value: Any = env_field("ANY", default=None)


@dataclass
class OmitHolder:
    """Polymorphic holder suppressed when empty."""

    value: Any = env_field("ANY,omitempty", default=None)


class Color(str, Enum):
    """String enum."""

    RED = "red"


class Level(IntEnum):
    """Integer enum."""

    HIGH = 3


@dataclass
class Scalars:
    """One field per scalar flavor."""

    i: int = env_field("I", default=0)
    f: float = env_field("F", default=0.0)
    s: str = env_field("S", default="")
    color: Color = env_field("COLOR", default=Color.RED)
    level: Level = env_field("LEVEL", default=Level.HIGH)


@dataclass
class Required:
    """Record with a required field."""

    name: str = env_field("NAME")


@dataclass
class CustomKey:
    """Tags stored under a non-default metadata key."""

    a: str = field(default="x", metadata={"shell": "SHELL_A"})
    b: str = env_field("ENV_B", default="y")


@dataclass
class OptionalList:
    """Optional list field: unsupported once it holds a list."""

    items: list[str] | None = env_field("ITEMS", default=None)
    flag: bool | None = env_field("FLAG", default=None)
    either: int | str | None = env_field("EITHER", default=None)


@dataclass
class IntHoldingBool:
    """Int-annotated field that may be given a bool."""

    n: int = env_field("N", default=0)


@dataclass
class Unassigned:
    """Field excluded from __init__ and never assigned."""

    late: str = field(init=False, metadata={"env": "LATE"})
    name: str = env_field("NAME", default="n")


@dataclass
class Rejecting:
    """Record whose validation always fails."""

    port: int = env_field("PORT", default=-1)

    def __post_init__(self) -> None:
        if self.port < 0:
            raise ValueError(f"port out of range: {self.port}")


def not_a_record() -> None:
    """Plain function used to exercise RECORD spec validation."""

"""Runtime values of the Aleph language and the comparisons defined on them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union


class AlephError(Exception):
    """Raised when an Aleph program cannot be evaluated."""


class Kind(enum.IntEnum):
    """The kind of a runtime value."""

    ELEM = 1
    SET = 2
    LIST = 3
    BOOL = 4
    INT = 19


@dataclass(frozen=True)
class Atom:
    """A string atom."""

    text: str
    kind: ClassVar[Kind] = Kind.ELEM

    def copy(self) -> "Atom":
        return self

    def __str__(self) -> str:
        return format_value(self)


@dataclass(frozen=True)
class Int:
    """An integer."""

    value: int
    kind: ClassVar[Kind] = Kind.INT

    def copy(self) -> "Int":
        return self

    def __str__(self) -> str:
        return format_value(self)


@dataclass(frozen=True)
class Bool:
    """A boolean."""

    value: bool
    kind: ClassVar[Kind] = Kind.BOOL

    def copy(self) -> "Bool":
        return self

    def __str__(self) -> str:
        return format_value(self)


@dataclass
class ListValue:
    """An ordered list of values."""

    items: list = field(default_factory=list)
    kind: ClassVar[Kind] = Kind.LIST

    def copy(self) -> "ListValue":
        """Return a deep copy."""
        return ListValue([item.copy() for item in self.items])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        return format_value(self)


@dataclass
class SetValue:
    """A set of values, kept in insertion order."""

    items: list = field(default_factory=list)
    kind: ClassVar[Kind] = Kind.SET

    def copy(self) -> "SetValue":
        """Return a deep copy."""
        return SetValue([item.copy() for item in self.items])

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        return format_value(self)


Value = Union[Atom, Int, Bool, ListValue, SetValue]
Collection = Union[ListValue, SetValue]


def _kind(value: Optional[Value]) -> Optional[Kind]:
    return None if value is None else value.kind


def is_equal(a: Optional[Value], b: Optional[Value]) -> bool:
    """Language equality: atoms and ints by value, lists pairwise, sets by membership.

    Booleans never compare equal, and a set containing nothing is never
    equal to another set, because membership of an absent element fails.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if a.kind is not b.kind:
        return False
    if isinstance(a, Atom):
        return a.text == b.text
    if isinstance(a, Int):
        return a.value == b.value
    if isinstance(a, ListValue):
        return len(a.items) == len(b.items) and all(
            is_equal(x, y) for x, y in zip(a.items, b.items)
        )
    if isinstance(a, SetValue):
        if cardinal(a) != cardinal(b):
            return False
        if not a.items:
            return contains(b, None)
        return all(contains(b, item) for item in a.items)
    return False


def compare(a: Optional[Value], b: Optional[Value]) -> int:
    """Order two values: 1 if a is greater, -1 if smaller, 0 otherwise.

    Integers compare by value, lists by length and sets by cardinality.
    Atoms give 1 when a sorts after b and 0 in every other case.
    """
    if a is None and b is None:
        return 1
    if a is None or b is None:
        return 0
    if a.kind is not b.kind:
        return 0
    if isinstance(a, Atom):
        return 1 if a.text > b.text else 0
    if isinstance(a, Int):
        left, right = a.value, b.value
    elif isinstance(a, ListValue):
        left, right = list_size(a), list_size(b)
    elif isinstance(a, SetValue):
        left, right = cardinal(a), cardinal(b)
    else:
        return 0
    return (left > right) - (left < right)


def cardinal(value: Optional[Value]) -> int:
    """Number of elements of a set, or -1 for anything else."""
    if isinstance(value, SetValue):
        return len(value.items)
    return -1


def list_size(value: Optional[Value]) -> int:
    """Number of elements of a list, or -1 for anything else."""
    if isinstance(value, ListValue):
        return len(value.items)
    return -1


def contains(collection: Optional[Value], element: Optional[Value]) -> bool:
    """Whether a set holds the element.

    Only sets have members; atoms and integers match by value, lists and
    sets by language equality, and booleans are never found.
    """
    if not isinstance(collection, SetValue) or element is None:
        return False
    if not collection.items:
        return False
    if isinstance(element, Atom):
        return any(isinstance(item, Atom) and item.text == element.text
                   for item in collection.items)
    if isinstance(element, Int):
        return any(isinstance(item, Int) and item.value == element.value
                   for item in collection.items)
    if isinstance(element, (SetValue, ListValue)):
        return any(isinstance(item, (SetValue, ListValue)) and is_equal(item, element)
                   for item in collection.items)
    return False


def format_value(value: Optional[Value]) -> str:
    """Render a value the way the print statement shows it."""
    if value is None:
        return ""
    if isinstance(value, Atom):
        return value.text
    if isinstance(value, Bool):
        return "true" if value.value else "false"
    if isinstance(value, Int):
        return str(value.value)
    inner = ",".join(format_value(item) for item in value.items)
    if isinstance(value, ListValue):
        return f"[{inner}]"
    return f"{{{inner}}}"
"""Operations on Aleph sets and lists."""

from __future__ import annotations

from typing import Optional

from .values import (
    AlephError,
    Collection,
    ListValue,
    SetValue,
    Value,
    contains,
    is_equal,
)


def _require_set(value: object, role: str) -> SetValue:
    if not isinstance(value, SetValue):
        raise AlephError(f"{role} operand must be a set")
    return value


def _require_collection(value: object) -> Collection:
    if not isinstance(value, (SetValue, ListValue)):
        raise AlephError("operand must be a set or a list")
    return value


def _require_list(value: object) -> ListValue:
    if not isinstance(value, ListValue):
        raise AlephError("operand must be a list")
    return value


def union(a: SetValue, b: SetValue) -> SetValue:
    """Elements of a followed by the elements of b that a lacks.

    Equal sets give a copy of b; an empty operand gives a copy of the other.
    """
    a = _require_set(a, "left")
    b = _require_set(b, "right")
    if is_equal(a, b):
        return b.copy()
    if not a.items:
        return b.copy()
    if not b.items:
        return a.copy()
    result = a.copy()
    for item in b.items:
        if not contains(result, item):
            result.items.append(item.copy())
    return result


def intersection(a: SetValue, b: SetValue) -> SetValue:
    """Elements of b that are members of a, in the order of b."""
    a = _require_set(a, "left")
    b = _require_set(b, "right")
    return SetValue([item.copy() for item in b.items if contains(a, item)])


def difference(a: SetValue, b: SetValue) -> SetValue:
    """Elements of a that are not members of b.

    An empty b gives a copy of a, and an empty a gives a copy of b.
    """
    a = _require_set(a, "left")
    b = _require_set(b, "right")
    if not b.items:
        return a.copy()
    if not a.items:
        return b.copy()
    if is_equal(a, b):
        return SetValue()
    return SetValue([item.copy() for item in a.items if not contains(b, item)])


def includes(a: SetValue, b: SetValue) -> bool:
    """Whether every element of a is a member of b.

    An empty a is never included, since there is no element to find.
    """
    a = _require_set(a, "left")
    if not a.items:
        return False
    return all(contains(b, item) for item in a.items)


def first(collection: Collection) -> Optional[Value]:
    """A copy of the first element, or None when the collection is empty."""
    collection = _require_collection(collection)
    return collection.items[0].copy() if collection.items else None


def last(collection: Collection) -> Optional[Value]:
    """A copy of the last element, or None when the collection is empty."""
    collection = _require_collection(collection)
    return collection.items[-1].copy() if collection.items else None


def add_front(element: Value, collection: Collection) -> Collection:
    """A new collection of the same kind with a copy of element in front."""
    collection = _require_collection(collection)
    return type(collection)([element.copy(), *collection.items])


def push(lst: ListValue, element: Value) -> None:
    """Append element to the end of the list, in place."""
    _require_list(lst).items.append(element)


def pop(lst: ListValue) -> Optional[Value]:
    """Remove and return the last element, or None when the list is empty."""
    lst = _require_list(lst)
    return lst.items.pop() if lst.items else None


def element_at(collection: Collection, position: int) -> Optional[Value]:
    """A copy of the element at a zero-based position, or None if out of range."""
    collection = _require_collection(collection)
    if 0 <= position < len(collection.items):
        return collection.items[position].copy()
    return None
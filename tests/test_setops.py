import pytest

from alephlang.setops import (
    add_front,
    difference,
    element_at,
    first,
    includes,
    intersection,
    last,
    pop,
    push,
    union,
)
from alephlang.values import (
    AlephError,
    Atom,
    Bool,
    Int,
    ListValue,
    SetValue,
    contains,
    format_value,
    is_equal,
)


def ints(*values):
    return [Int(v) for v in values]


def test_union_appends_missing_elements_in_order():
    a = SetValue(ints(1, 2))
    b = SetValue(ints(2, 3))
    result = union(a, b)
    assert result.items == ints(1, 2, 3)
    assert format_value(result) == "{1,2,3}"


def test_union_contains_every_element_of_both():
    a = SetValue([Atom("x"), Int(4)])
    b = SetValue([Atom("y"), Int(4), SetValue(ints(1))])
    result = union(a, b)
    for item in a.items + b.items:
        assert contains(result, item)


def test_union_does_not_modify_operands():
    a = SetValue(ints(1))
    b = SetValue(ints(2))
    union(a, b)
    assert a.items == ints(1)
    assert b.items == ints(2)


def test_union_with_empty_operand_copies_other():
    b = SetValue(ints(5, 5))
    assert union(SetValue(), b).items == ints(5, 5)
    assert union(b, SetValue()).items == ints(5, 5)


def test_union_of_equal_sets_gives_right_operand():
    a = SetValue(ints(1, 2))
    b = SetValue(ints(2, 1))
    assert union(a, b).items == ints(2, 1)


def test_union_rejects_lists():
    with pytest.raises(AlephError):
        union(ListValue(ints(1)), SetValue(ints(1)))


def test_intersection_keeps_order_of_right_operand():
    a = SetValue(ints(1, 2, 3))
    b = SetValue(ints(3, 4, 1))
    assert intersection(a, b).items == ints(3, 1)


def test_intersection_elements_are_in_both():
    a = SetValue([Atom("a"), Atom("b"), SetValue(ints(1))])
    b = SetValue([Atom("b"), SetValue(ints(1)), Atom("c")])
    result = intersection(a, b)
    assert len(result) == 2
    for item in result:
        assert contains(a, item) and contains(b, item)


def test_intersection_with_empty_is_empty():
    assert intersection(SetValue(ints(1)), SetValue()).items == []
    assert intersection(SetValue(), SetValue(ints(1))).items == []


def test_difference_removes_members_of_right():
    a = SetValue(ints(1, 2, 3))
    b = SetValue(ints(2))
    assert difference(a, b).items == ints(1, 3)


def test_difference_of_equal_sets_is_empty():
    a = SetValue(ints(1, 2))
    assert difference(a, SetValue(ints(2, 1))).items == []


def test_difference_with_empty_operands():
    a = SetValue(ints(7))
    assert difference(a, SetValue()).items == ints(7)
    assert difference(SetValue(), a).items == ints(7)


def test_difference_when_everything_is_removed():
    a = SetValue(ints(1))
    b = SetValue(ints(1, 2))
    assert difference(a, b).items == []


def test_includes_true_when_all_members_found():
    assert includes(SetValue(ints(1, 2)), SetValue(ints(3, 2, 1))) is True


def test_includes_false_when_member_missing():
    assert includes(SetValue(ints(1, 4)), SetValue(ints(1, 2))) is False


def test_includes_empty_set_is_false():
    assert includes(SetValue(), SetValue(ints(1))) is False


def test_includes_booleans_never_found():
    assert includes(SetValue([Bool(True)]), SetValue([Bool(True)])) is False


def test_first_and_last():
    lst = ListValue(ints(4, 5, 6))
    assert first(lst) == Int(4)
    assert last(lst) == Int(6)
    s = SetValue([Atom("p"), Atom("q")])
    assert first(s) == Atom("p")
    assert last(s) == Atom("q")


def test_first_and_last_of_empty_are_none():
    assert first(ListValue()) is None
    assert last(SetValue()) is None


def test_first_returns_copy_of_nested_collection():
    inner = ListValue(ints(1))
    outer = ListValue([inner])
    got = first(outer)
    got.items.append(Int(2))
    assert inner.items == ints(1)


def test_first_rejects_non_collection():
    with pytest.raises(AlephError):
        first(Int(1))


def test_add_front_keeps_kind_and_leaves_original():
    lst = ListValue(ints(2, 3))
    result = add_front(Int(1), lst)
    assert isinstance(result, ListValue)
    assert result.items == ints(1, 2, 3)
    assert lst.items == ints(2, 3)
    s = add_front(Atom("z"), SetValue())
    assert isinstance(s, SetValue)
    assert s.items == [Atom("z")]


def test_push_then_pop_round_trip():
    lst = ListValue(ints(1))
    push(lst, Int(9))
    assert lst.items == ints(1, 9)
    assert pop(lst) == Int(9)
    assert lst.items == ints(1)
    assert pop(lst) == Int(1)
    assert pop(lst) is None


def test_push_and_pop_reject_sets():
    with pytest.raises(AlephError):
        push(SetValue(), Int(1))
    with pytest.raises(AlephError):
        pop(SetValue(ints(1)))


def test_element_at_positions():
    lst = ListValue([Atom("a"), Atom("b")])
    assert element_at(lst, 0) == Atom("a")
    assert element_at(lst, 1) == Atom("b")
    assert element_at(lst, 2) is None
    assert element_at(lst, -1) is None


def test_element_at_returns_copy():
    inner = SetValue(ints(1))
    s = SetValue([inner])
    got = element_at(s, 0)
    assert is_equal(got, inner)
    got.items.clear()
    assert inner.items == ints(1)
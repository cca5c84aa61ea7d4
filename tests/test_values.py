import pytest

from alephlang.values import (
    AlephError,
    Atom,
    Bool,
    Int,
    Kind,
    ListValue,
    SetValue,
    cardinal,
    compare,
    contains,
    format_value,
    is_equal,
    list_size,
)


def test_kinds_match_node_types():
    assert Atom("a").kind is Kind.ELEM
    assert Int(3).kind is Kind.INT
    assert Bool(True).kind is Kind.BOOL
    assert ListValue().kind is Kind.LIST
    assert SetValue().kind is Kind.SET
    assert int(Kind.INT) == 19


def test_alepherror_carries_message():
    err = AlephError("boom")
    assert str(err) == "boom"
    assert isinstance(err, Exception)


def test_equal_scalars():
    assert is_equal(Atom("x"), Atom("x"))
    assert not is_equal(Atom("x"), Atom("y"))
    assert is_equal(Int(4), Int(4))
    assert not is_equal(Int(4), Int(5))
    assert not is_equal(Int(4), Atom("4"))


def test_equal_none_cases():
    assert is_equal(None, None)
    assert not is_equal(None, Int(1))
    assert not is_equal(Int(1), None)


def test_bools_never_equal():
    assert not is_equal(Bool(True), Bool(True))


def test_lists_compare_pairwise_in_order():
    a = ListValue([Int(1), Atom("b")])
    assert is_equal(a, ListValue([Int(1), Atom("b")]))
    assert not is_equal(a, ListValue([Atom("b"), Int(1)]))
    assert not is_equal(a, ListValue([Int(1)]))
    assert is_equal(ListValue(), ListValue())


def test_sets_ignore_order():
    a = SetValue([Int(1), Atom("b")])
    assert is_equal(a, SetValue([Atom("b"), Int(1)]))
    assert not is_equal(a, SetValue([Int(1), Atom("c")]))
    assert not is_equal(a, SetValue([Int(1)]))


def test_empty_sets_not_equal():
    assert not is_equal(SetValue(), SetValue())


def test_nested_sets_equal():
    a = SetValue([SetValue([Int(1), Int(2)]), Atom("z")])
    b = SetValue([Atom("z"), SetValue([Int(2), Int(1)])])
    assert is_equal(a, b)


def test_compare_ints_antisymmetric():
    assert compare(Int(5), Int(2)) == 1
    assert compare(Int(2), Int(5)) == -1
    assert compare(Int(3), Int(3)) == 0


def test_compare_collections_by_size():
    small = ListValue([Int(9)])
    big = ListValue([Int(1), Int(2)])
    assert compare(big, small) == 1
    assert compare(small, big) == -1
    assert compare(SetValue([Int(1)]), SetValue([Atom("q")])) == 0


def test_compare_atoms_only_reports_greater():
    assert compare(Atom("b"), Atom("a")) == 1
    assert compare(Atom("a"), Atom("b")) == 0


def test_compare_mixed_and_none():
    assert compare(Int(1), Atom("a")) == 0
    assert compare(None, None) == 1
    assert compare(None, Int(1)) == 0
    assert compare(Bool(True), Bool(False)) == 0


def test_cardinal_and_list_size():
    assert cardinal(SetValue([Int(1), Int(2)])) == 2
    assert cardinal(SetValue()) == 0
    assert cardinal(ListValue([Int(1)])) == -1
    assert list_size(ListValue([Int(1), Int(2), Int(3)])) == 3
    assert list_size(ListValue()) == 0
    assert list_size(SetValue([Int(1)])) == -1
    assert list_size(None) == -1


def test_contains_scalars():
    s = SetValue([Atom("a"), Int(7)])
    assert contains(s, Atom("a"))
    assert contains(s, Int(7))
    assert not contains(s, Atom("7"))
    assert not contains(s, Int(8))


def test_contains_only_for_sets():
    assert not contains(ListValue([Int(1)]), Int(1))
    assert not contains(SetValue(), Int(1))
    assert not contains(SetValue([Int(1)]), None)


def test_contains_collections_and_bools():
    s = SetValue([ListValue([Int(1), Int(2)]), Bool(True)])
    assert contains(s, ListValue([Int(1), Int(2)]))
    assert not contains(s, ListValue([Int(2), Int(1)]))
    assert not contains(s, Bool(True))


def test_format_scalars():
    assert format_value(Atom("hola")) == "hola"
    assert format_value(Int(-12)) == "-12"
    assert format_value(Bool(True)) == "true"
    assert format_value(Bool(False)) == "false"
    assert format_value(None) == ""


def test_format_collections():
    assert format_value(ListValue()) == "[]"
    assert format_value(SetValue([Atom("x"), Atom("y")])) == "{x,y}"
    nested = ListValue([Atom("a"), ListValue([Int(1), Int(2)])])
    assert str(nested) == "[a,[1,2]]"


def test_copy_is_deep():
    inner = ListValue([Int(1)])
    outer = SetValue([inner])
    clone = outer.copy()
    assert is_equal(clone, outer)
    clone.items[0].items.append(Int(2))
    assert list_size(inner) == 1
    assert list_size(clone.items[0]) == 2
# tests/test_contract.py
"""
Tests for the Structure Contract: dispatch, reference implementations, and
the round-trip law.
"""

import pytest

from recursion_schemes import (
    ConsList,
    ContractNotFoundError,
    ContractViolation,
    RecStruct,
    assert_round_trip,
    cata,
    check_round_trip,
    contract_for,
    is_base,
    unwrap,
    wrap,
)
from recursion_schemes.core.contract import MethodContract
from recursion_schemes.structures.plugins.counter import CounterContract
from recursion_schemes.structures.plugins.sequence import ListContract, TupleContract
from recursion_schemes.structures.plugins.text import TextContract


class Tree:
    """Right-spine tree that implements the contract itself, in pre-order."""

    def __init__(self, value=None, children=()):
        self.value = value
        self.children = list(children)

    def is_base(self):
        return self.value is None and not self.children

    def unwrap(self):
        if self.is_base():
            raise ContractViolation("empty tree")
        if self.value is not None:
            return self.value, Tree(None, self.children)
        first, *others = self.children
        element, rest = first.unwrap()
        remaining = [rest] if not rest.is_base() else []
        return element, Tree(None, remaining + others)

    def wrap(self, element):
        return Tree(element, [self] if not self.is_base() else [])


# ---------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------


class TestDispatch:
    """contract_for resolves direct implementations before adapters."""

    @pytest.mark.parametrize(
        "structure, adapter",
        [
            ([1], ListContract),
            ((1,), TupleContract),
            ("a", TextContract),
            (3, CounterContract),
            (ConsList.of(1), MethodContract),
        ],
    )
    def test_resolves_implementation(self, structure, adapter):
        assert contract_for(structure) is adapter

    def test_subclass_uses_parent_adapter(self):
        class Stack(list):
            pass

        assert contract_for(Stack([1, 2])) is ListContract
        assert unwrap(Stack([1, 2])) == (1, [2])

    def test_direct_implementation_is_recstruct(self):
        assert isinstance(ConsList.nil(), RecStruct)
        assert isinstance(Tree(1), RecStruct)
        assert not isinstance([1], RecStruct)

    def test_unknown_type_raises(self):
        with pytest.raises(ContractNotFoundError) as exc_info:
            is_base({"a": 1})

        assert "dict" in str(exc_info.value)
        assert "list" in str(exc_info.value)

    def test_not_found_is_also_type_error(self):
        with pytest.raises(TypeError):
            wrap(object(), 1)

    def test_methods_added_after_first_dispatch_are_used(self):
        class Late:
            pass

        with pytest.raises(ContractNotFoundError):
            is_base(Late())

        Late.is_base = lambda self: True
        Late.unwrap = lambda self: (None, self)
        Late.wrap = lambda self, element: self

        assert contract_for(Late()) is MethodContract
        assert is_base(Late())

    def test_user_type_folds_without_registration(self):
        tree = Tree(1, [Tree(2, [Tree(3)]), Tree(4)])
        assert cata(tree, [], lambda h, acc: [h] + acc) == [1, 2, 3, 4]


# ---------------------------------------------------------------------
# Reference implementations
# ---------------------------------------------------------------------


class TestSequences:
    def test_list(self):
        assert is_base([])
        assert not is_base([0])
        assert unwrap([1, 2, 3]) == (1, [2, 3])
        assert wrap([2, 3], 1) == [1, 2, 3]

    def test_wrap_does_not_mutate_rest(self):
        rest = [2]
        wrap(rest, 1)
        assert rest == [2]

    def test_tuple(self):
        assert is_base(())
        assert unwrap((1, 2)) == (1, (2,))
        assert wrap((), "x") == ("x",)

    @pytest.mark.parametrize("base", [[], (), ""])
    def test_unwrap_base_is_violation(self, base):
        with pytest.raises(ContractViolation):
            unwrap(base)


class TestText:
    def test_string(self):
        assert is_base("")
        assert unwrap("abc") == ("a", "bc")
        assert wrap("bc", "a") == "abc"

    @pytest.mark.parametrize("element", ["ab", "", 1, None])
    def test_only_single_characters_wrap(self, element):
        with pytest.raises(ContractViolation):
            wrap("rest", element)


class TestCounter:
    def test_counts_down(self):
        assert unwrap(5) == (5, 4)
        assert not is_base(1)

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_non_positive_is_base(self, n):
        assert is_base(n)
        with pytest.raises(ContractViolation):
            unwrap(n)

    def test_wrap_adds(self):
        assert wrap(10, 5) == 15

    def test_bool_is_rejected(self):
        with pytest.raises(ContractViolation):
            is_base(True)


class TestConsList:
    def test_construction(self):
        cells = ConsList.of(1, 2, 3)
        assert cells.to_list() == [1, 2, 3]
        assert len(cells) == 3
        assert ConsList.from_iterable("ab") == ConsList.of("a", "b")

    def test_contract(self):
        cells = ConsList.of(1, 2)
        assert not cells.is_base()
        assert cells.unwrap() == (1, ConsList.of(2))
        assert ConsList.of(2).wrap(1) == cells

    def test_direct_construction(self):
        cell = ConsList(1, ConsList.nil())

        assert not cell.is_base()
        assert len(cell) == 1
        assert cell == ConsList.of(1)
        assert cata(cell, 0, lambda h, acc: h + acc) == 1
        assert ConsList().is_base()

    @pytest.mark.parametrize("head, tail", [(1, None), (1, [2]), (None, ())])
    def test_direct_construction_rejects_bad_tail(self, head, tail):
        with pytest.raises(TypeError, match="tail"):
            ConsList(head, tail)

    def test_unwrap_nil_is_violation(self):
        with pytest.raises(ContractViolation):
            ConsList.nil().unwrap()

    def test_equality_and_hash(self):
        assert ConsList.of(1, 2) == ConsList.of(1, 2)
        assert ConsList.of(1, 2) != ConsList.of(2, 1)
        assert ConsList.of(1, 2) != [1, 2]
        assert len({ConsList.of(1), ConsList.of(1)}) == 1

    def test_repr(self):
        assert repr(ConsList.of(1, "a")) == "ConsList.of(1, 'a')"
        assert repr(ConsList.nil()) == "ConsList.of()"


# ---------------------------------------------------------------------
# Round-trip law
# ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "rest, element",
    [
        ([], 1),
        ([2, 3], 1),
        ([[1]], [0]),
        ((), None),
        ((2, 3), "x"),
        ("", "a"),
        ("bc", "a"),
        (ConsList.nil(), 1),
        (ConsList.of(2, 3), 1),
        (0, 1),
    ],
)
def test_round_trip_holds(rest, element):
    assert check_round_trip(rest, element)
    assert_round_trip(rest, element)


def test_counter_is_lawless():
    assert not check_round_trip(5, 3)

    with pytest.raises(ContractViolation, match="Round-trip law violated"):
        assert_round_trip(5, 3)


def test_round_trip_surfaces_implementation_errors():
    with pytest.raises(ContractViolation, match="single character"):
        assert_round_trip("bc", "too long")

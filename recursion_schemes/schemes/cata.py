# recursion_schemes/schemes/cata.py
"""
Catamorphism - the generalized fold.

    cata(structure, initial, combine) -> accumulator
    cata(initial, combine)            -> Catamorphism (structure -> accumulator)

The fold is right-associative: for a sequence-like structure
``[x1, x2, ..., xn]`` the result is ``combine(x1, combine(x2, ... combine(xn, initial)))``.
On lists it is ``functools.reduce`` over the reversed list.

The structure is taken apart with an explicit loop rather than the call stack,
so folds are not bounded by the interpreter's recursion limit. Evaluation order
is the one of the recursive definition: every ``unwrap`` happens first, then
``combine`` runs innermost-first (from the last element back to the first).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from recursion_schemes.core.contract import contract_for
from recursion_schemes.core.registry import ContractRegistry

Combine = Callable[[Any, Any], Any]


def fold(
    structure: Any,
    initial: Any,
    combine: Combine,
    registry: Optional[ContractRegistry] = None,
) -> Any:
    """
    Fold ``structure`` into an accumulator.

    Args:
        structure: Any value with a Structure Contract implementation
        initial: Accumulator returned for a base structure
        combine: ``(element, folded_rest) -> accumulator``
        registry: Registry to resolve adapters from (default registry if None)

    Returns:
        The final accumulator

    Raises:
        ContractNotFoundError: If some reachable value has no contract
        Whatever ``combine`` or the contract implementation raises, unchanged
    """
    elements: List[Any] = []
    current = structure

    while True:
        contract = contract_for(current, registry)
        if contract.is_base(current):
            break
        element, current = contract.unwrap(current)
        elements.append(element)

    acc = initial
    for element in reversed(elements):
        acc = combine(element, acc)

    return acc


@dataclass(frozen=True)
class Catamorphism:
    """
    A fold with its accumulator and combining function fixed.

    Examples:
        >>> my_sum = Catamorphism(0, lambda h, acc: h + acc)
        >>> my_sum([3, 5, 2, 9])
        19
        >>> factorial = Catamorphism(1, lambda n, acc: n * acc)
        >>> factorial(5)
        120
    """

    initial: Any
    combine: Combine
    registry: Optional[ContractRegistry] = None

    def __call__(self, structure: Any) -> Any:
        return fold(structure, self.initial, self.combine, self.registry)


def cata(*args: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """
    Catamorphism: consume a recursive structure.

    Called with three arguments ``(structure, initial, combine)`` it folds the
    structure. Called with two, ``(initial, combine)``, it returns a reusable
    Catamorphism.

    Examples:
        >>> cata([3, 5, 2, 9], 0, lambda h, acc: h + acc)
        19
        >>> cata(5, 1, lambda n, acc: n * acc)
        120
        >>> cata(0, lambda h, acc: h + acc)([3, 5, 2, 9])
        19
    """
    if len(args) == 3:
        structure, initial, combine = args
        return fold(structure, initial, combine, registry)

    if len(args) == 2:
        initial, combine = args
        if not callable(combine):
            raise TypeError(f"cata() combine must be callable, got {combine!r}")
        return Catamorphism(initial, combine, registry)

    raise TypeError(f"cata() takes 2 or 3 positional arguments but {len(args)} were given")

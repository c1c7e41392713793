# recursion_schemes/schemes/hylo.py
"""
Hylomorphism - unfold, then fold.

    hylo((seed, base), finished, step, initial, combine) -> accumulator
    hylo(anamorphism, catamorphism)                      -> Hylomorphism

Behaves exactly like ``cata(ana((seed, base), finished, step), initial, combine)``.
The intermediate structure is built in full. Like ana, it does not return if
``finished`` never becomes True.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from recursion_schemes.core.registry import ContractRegistry
from recursion_schemes.schemes.ana import _split_pair, unfold
from recursion_schemes.schemes.cata import fold


@dataclass(frozen=True)
class Hylomorphism:
    """
    Composition of an unfold and a fold: ``seed -> catamorphism(anamorphism(seed))``.

    Examples:
        >>> from recursion_schemes import ana, cata
        >>> five_squares = ana(lambda x: x > 5, lambda x: (x * x, x + 1))
        >>> my_sum = cata(0, lambda h, acc: h + acc)
        >>> Hylomorphism(five_squares, my_sum)((1, []))
        55
    """

    anamorphism: Callable[[Any], Any]
    catamorphism: Callable[[Any], Any]

    def __call__(self, init_state: Any) -> Any:
        return self.catamorphism(self.anamorphism(init_state))


def hylo(*args: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """
    Hylomorphism: build a structure with an unfold and consume it with a fold.

    With five arguments ``((seed, base), finished, step, initial, combine)``
    it runs both. With two, ``(anamorphism, catamorphism)``, it composes two
    already-built callables (for instance the results of ``ana(finished, step)``
    and ``cata(initial, combine)``).

    Examples:
        >>> hylo((1, []), lambda x: x > 5, lambda x: (x * x, x + 1),
        ...      0, lambda h, acc: h + acc)
        55
    """
    if len(args) == 5:
        init_state, finished, step, initial, combine = args
        seed, base = _split_pair(init_state, "hylo() initial state")
        structure = unfold(seed, base, finished, step, registry)
        return fold(structure, initial, combine, registry)

    if len(args) == 2:
        anamorphism, catamorphism = args
        if not callable(anamorphism) or not callable(catamorphism):
            raise TypeError("hylo() anamorphism and catamorphism must be callable")
        return Hylomorphism(anamorphism, catamorphism)

    raise TypeError(f"hylo() takes 2 or 5 positional arguments but {len(args)} were given")

# recursion_schemes/structures/plugins/counter.py
"""
Integer counter adapter.

Treats a non-negative integer ``n`` as the pseudo-structure ``n, n-1, ..., 1``:

    cata(5, 1, lambda n, acc: n * acc)  # 120

Wrapping adds the element to the accumulator, so an unfold onto an integer
sums what it emits:

    ana((1, 0), lambda x: x == 16, lambda x: (x, x + 1))  # 120

That makes int a lawless pseudo-structure: the round-trip law only holds
for ``wrap(0, 1)``.
"""

from __future__ import annotations

from typing import Tuple

from recursion_schemes.core.exceptions import ContractViolation


class CounterContract:
    """Structure Contract for ``int``: base is any ``n <= 0``."""

    plugin_name = "int"
    structure_type = int

    @staticmethod
    def is_base(structure: int) -> bool:
        _reject_bool(structure)
        return structure <= 0

    @staticmethod
    def unwrap(structure: int) -> Tuple[int, int]:
        _reject_bool(structure)
        if structure <= 0:
            raise ContractViolation(f"Cannot unwrap exhausted counter {structure}")
        return structure, structure - 1

    @staticmethod
    def wrap(rest: int, element: int) -> int:
        _reject_bool(rest)
        return rest + element


def _reject_bool(value: int) -> None:
    if isinstance(value, bool):
        raise ContractViolation("bool is not a counter")

# recursion_schemes/structures/plugins/sequence.py
"""
List and tuple adapters.

Folding a list with cata is a right fold; unfolding with ana prepends each
emitted element, so the result reads in emission order.

Both adapters copy on every unwrap and wrap (``s[1:]``, ``[e] + rest``), which
keeps structures immutable from the engines' point of view at O(n) per step.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from recursion_schemes.core.exceptions import ContractViolation


class ListContract:
    """Structure Contract for ``list``: base is ``[]``."""

    plugin_name = "list"
    structure_type = list

    @staticmethod
    def is_base(structure: List[Any]) -> bool:
        return len(structure) == 0

    @staticmethod
    def unwrap(structure: List[Any]) -> Tuple[Any, List[Any]]:
        if not structure:
            raise ContractViolation("Cannot unwrap an empty list")
        return structure[0], structure[1:]

    @staticmethod
    def wrap(rest: List[Any], element: Any) -> List[Any]:
        return [element, *rest]


class TupleContract:
    """Structure Contract for ``tuple``: base is ``()``."""

    plugin_name = "tuple"
    structure_type = tuple

    @staticmethod
    def is_base(structure: Tuple[Any, ...]) -> bool:
        return len(structure) == 0

    @staticmethod
    def unwrap(structure: Tuple[Any, ...]) -> Tuple[Any, Tuple[Any, ...]]:
        if not structure:
            raise ContractViolation("Cannot unwrap an empty tuple")
        return structure[0], structure[1:]

    @staticmethod
    def wrap(rest: Tuple[Any, ...], element: Any) -> Tuple[Any, ...]:
        return (element, *rest)

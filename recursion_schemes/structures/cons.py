# recursion_schemes/structures/cons.py
"""
ConsList - an immutable singly linked list.

Implements the Structure Contract directly (RecStruct), with no adapter:

    >>> from recursion_schemes import cata
    >>> cata(ConsList.of(3, 5, 2, 9), 0, lambda h, acc: h + acc)
    19
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from recursion_schemes.core.exceptions import ContractViolation


@dataclass(frozen=True, eq=False)
class ConsList:
    """
    A cons cell ``ConsList(head, tail)``, or the empty list ``ConsList()``.

    ``empty`` is derived: a value without a tail is the empty list.
    ``ConsList.nil()`` and ``ConsList.of(...)`` are the usual constructors.
    """

    head: Any = None
    tail: Optional["ConsList"] = None
    empty: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.tail is None:
            if self.head is not None:
                raise TypeError(
                    f"ConsList cell needs a ConsList tail, got head {self.head!r} and no tail"
                )
        elif not isinstance(self.tail, ConsList):
            raise TypeError(f"ConsList tail must be a ConsList, got {self.tail!r}")
        object.__setattr__(self, "empty", self.tail is None)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def nil(cls) -> "ConsList":
        return cls()

    @classmethod
    def of(cls, *items: Any) -> "ConsList":
        return cls.from_iterable(items)

    @classmethod
    def from_iterable(cls, items: Iterable[Any]) -> "ConsList":
        result = cls.nil()
        for item in reversed(list(items)):
            result = result.wrap(item)
        return result

    # -------------------------------------------------------------------------
    # Structure Contract
    # -------------------------------------------------------------------------

    def is_base(self) -> bool:
        return self.empty

    def unwrap(self) -> Tuple[Any, "ConsList"]:
        if self.empty:
            raise ContractViolation("Cannot unwrap an empty ConsList")
        return self.head, self.tail

    def wrap(self, element: Any) -> "ConsList":
        return ConsList(head=element, tail=self)

    # -------------------------------------------------------------------------
    # Conveniences
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        cell = self
        while not cell.empty:
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_list(self) -> List[Any]:
        return list(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConsList):
            return NotImplemented
        return list(self) == list(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"ConsList.of({', '.join(repr(item) for item in self)})"

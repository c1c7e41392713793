# recursion_schemes/core/laws.py
"""
Contract laws.

Every lawful Structure Contract implementation satisfies the round-trip law:

    unwrap(wrap(rest, element)) == (element, rest)

The engines cannot detect a violation at runtime (they would have to wrap and
unwrap every value twice), so the law is checked here, for use in tests of
contract implementations.
"""

from __future__ import annotations

from typing import Any, Optional

from recursion_schemes.core.contract import unwrap, wrap
from recursion_schemes.core.exceptions import ContractViolation
from recursion_schemes.core.registry import ContractRegistry


def round_trip(rest: Any, element: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """Return ``unwrap(wrap(rest, element))``."""
    return unwrap(wrap(rest, element, registry), registry)


def check_round_trip(
    rest: Any, element: Any, registry: Optional[ContractRegistry] = None
) -> bool:
    """
    True iff the round-trip law holds for ``rest`` and ``element``.

    Examples:
        >>> check_round_trip([2, 3], 1)
        True
        >>> check_round_trip(5, 3)  # int is a lawless pseudo-structure
        False
    """
    return round_trip(rest, element, registry) == (element, rest)


def assert_round_trip(
    rest: Any, element: Any, registry: Optional[ContractRegistry] = None
) -> None:
    """
    Raise ContractViolation if the round-trip law fails.

    Errors raised by the implementation itself propagate unchanged.
    """
    actual = round_trip(rest, element, registry)
    expected = (element, rest)
    if actual != expected:
        raise ContractViolation(
            f"Round-trip law violated for {type(rest).__name__}: "
            f"unwrap(wrap({rest!r}, {element!r})) == {actual!r}, expected {expected!r}"
        )

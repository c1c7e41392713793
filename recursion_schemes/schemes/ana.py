# recursion_schemes/schemes/ana.py
"""
Anamorphism - the generalized unfold.

    ana((seed, base), finished, step) -> structure
    ana(finished, step)               -> Anamorphism ((seed, base) -> structure)

``step(state)`` returns ``(element, next_state)``. ``finished`` is tested on
``next_state``, after the element of that step has been produced, and the
element is kept either way:

    ana((1, []), lambda x: x > 5, lambda x: (x * x, x + 1))  # [1, 4, 9, 16, 25]

So every unfold emits at least one element, and the number of elements equals
the number of ``step`` calls made before ``finished`` first returns True.

Unfolding is NOT guaranteed to terminate. If ``finished`` never returns True
the call never returns; no iteration cap is imposed.

Elements are collected in a loop, then wrapped onto ``base`` from the last
one back to the first, which is the order the recursive definition wraps in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from recursion_schemes.core.contract import wrap
from recursion_schemes.core.registry import ContractRegistry

Finished = Callable[[Any], bool]
Step = Callable[[Any], Tuple[Any, Any]]

_MISSING = object()


def _split_pair(value: Any, what: str) -> Tuple[Any, Any]:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise TypeError(f"{what} must be a pair, got {value!r}")
    return value[0], value[1]


def unfold(
    seed: Any,
    base: Any,
    finished: Finished,
    step: Step,
    registry: Optional[ContractRegistry] = None,
) -> Any:
    """
    Unfold from ``seed`` onto the base structure ``base``.

    Args:
        seed: Initial state
        base: Structure the emitted elements are wrapped onto; its type
              selects the contract implementation
        finished: ``state -> bool``, tested on each state ``step`` produces
        step: ``state -> (element, next_state)``, called once per element
        registry: Registry to resolve adapters from (default registry if None)

    Returns:
        ``base`` with every emitted element wrapped on, in emission order

    Raises:
        TypeError: If ``step`` does not return a pair
        ContractNotFoundError: If ``base`` has no contract implementation
        Whatever ``step``, ``finished`` or the contract raises, unchanged
    """
    elements: List[Any] = []
    state = seed

    while True:
        element, state = _split_pair(step(state), "step() result")
        elements.append(element)
        if finished(state):
            break

    result = base
    for element in reversed(elements):
        result = wrap(result, element, registry)

    return result


@dataclass(frozen=True)
class Anamorphism:
    """
    An unfold with its stopping predicate and step function fixed.

    Call it with the ``(seed, base)`` pair, or with seed and base separately.

    Examples:
        >>> zip_ = Anamorphism(
        ...     lambda s: not s[0] or not s[1],
        ...     lambda s: ((s[0][0], s[1][0]), (s[0][1:], s[1][1:])),
        ... )
        >>> zip_(([1, 2, 3, 4], ["a", "b", "c"]), [])
        [(1, 'a'), (2, 'b'), (3, 'c')]
    """

    finished: Finished
    step: Step
    registry: Optional[ContractRegistry] = None

    def __call__(self, init_state: Any, base: Any = _MISSING) -> Any:
        if base is _MISSING:
            seed, base = _split_pair(init_state, "ana() initial state")
        else:
            seed = init_state
        return unfold(seed, base, self.finished, self.step, self.registry)


def ana(*args: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """
    Anamorphism: produce a recursive structure from a seed.

    Called with three arguments ``((seed, base), finished, step)`` it unfolds.
    Called with two, ``(finished, step)``, it returns a reusable Anamorphism.

    Examples:
        >>> ana((1, []), lambda x: x > 5, lambda x: (x * x, x + 1))
        [1, 4, 9, 16, 25]
        >>> ana((1, 0), lambda x: x == 16, lambda x: (x, x + 1))
        120
    """
    if len(args) == 3:
        init_state, finished, step = args
        seed, base = _split_pair(init_state, "ana() initial state")
        return unfold(seed, base, finished, step, registry)

    if len(args) == 2:
        finished, step = args
        if not callable(finished) or not callable(step):
            raise TypeError("ana() finished and step must be callable")
        return Anamorphism(finished, step, registry)

    raise TypeError(f"ana() takes 2 or 3 positional arguments but {len(args)} were given")

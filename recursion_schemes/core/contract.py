# recursion_schemes/core/contract.py
"""
Structure Contract - the capability set every foldable/unfoldable type provides.

Three operations, nothing else:

    is_base(structure) -> bool
        True iff the structure has no further elements to yield.

    unwrap(structure) -> (element, rest)
        Split off one element. Only valid when is_base is False; raises
        ContractViolation on a base structure.

    wrap(rest, element) -> structure
        Build a structure with ``element`` in front of ``rest``.
        Law: unwrap(wrap(rest, element)) == (element, rest)

A type participates in one of two explicit ways:

1. It implements RecStruct directly (methods on the class, ``self`` is the
   structure, and for ``wrap`` it is ``rest``).
2. An adapter class implements StructureContract for it and is registered in
   a ContractRegistry (how list, tuple, str and int take part).

The module-level functions below resolve the implementation for a value and
dispatch to it. The engines only ever go through them.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Tuple, runtime_checkable

from recursion_schemes.core.exceptions import ContractNotFoundError
from recursion_schemes.core.registry import CONTRACT_METHODS, CONTRACT_REGISTRY, ContractRegistry


@runtime_checkable
class RecStruct(Protocol):
    """
    Protocol for types that implement the Structure Contract themselves.

    Examples:
        >>> from recursion_schemes.structures import ConsList
        >>> cells = ConsList.of(1, 2)
        >>> cells.is_base()
        False
        >>> cells.unwrap()
        (1, ConsList.of(2))
    """

    def is_base(self) -> bool:
        """True iff there are no further elements."""
        ...

    def unwrap(self) -> Tuple[Any, Any]:
        """Split into (element, rest). Raises ContractViolation on a base value."""
        ...

    def wrap(self, element: Any) -> Any:
        """Return a new structure with ``element`` in front of ``self``."""
        ...


@runtime_checkable
class StructureContract(Protocol):
    """
    Protocol for adapters that implement the contract on behalf of a type.

    Examples:
        >>> class ListContract:
        ...     plugin_name = "list"
        ...     structure_type = list
        ...
        ...     @staticmethod
        ...     def is_base(structure): return not structure
        ...
        ...     @staticmethod
        ...     def unwrap(structure): return structure[0], structure[1:]
        ...
        ...     @staticmethod
        ...     def wrap(rest, element): return [element] + rest
    """

    plugin_name: str
    structure_type: type

    def is_base(self, structure: Any) -> bool: ...

    def unwrap(self, structure: Any) -> Tuple[Any, Any]: ...

    def wrap(self, rest: Any, element: Any) -> Any: ...


class MethodContract:
    """Adapter that forwards to a RecStruct's own methods."""

    plugin_name = "recstruct"
    structure_type = object

    @staticmethod
    def is_base(structure: RecStruct) -> bool:
        return structure.is_base()

    @staticmethod
    def unwrap(structure: RecStruct) -> Tuple[Any, Any]:
        return structure.unwrap()

    @staticmethod
    def wrap(rest: RecStruct, element: Any) -> Any:
        return rest.wrap(element)


def _implements_directly(tp: type) -> bool:
    return all(callable(getattr(tp, method, None)) for method in CONTRACT_METHODS)


# =============================================================================
# Dispatch
# =============================================================================


def contract_for(structure: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """
    Resolve the contract implementation for ``structure``.

    Direct RecStruct implementations take precedence over registered adapters.

    Raises:
        ContractNotFoundError: If neither applies
    """
    tp = type(structure)

    if _implements_directly(tp):
        return MethodContract

    if registry is None:
        registry = CONTRACT_REGISTRY

    adapter = registry.for_type(tp)
    if adapter is None:
        raise ContractNotFoundError(
            f"No structure contract for type {tp.__name__!r}. "
            f"Implement RecStruct or register an adapter "
            f"(available: {registry.list_available()})"
        )

    return adapter


def is_base(structure: Any, registry: Optional[ContractRegistry] = None) -> bool:
    """True iff ``structure`` has no further elements."""
    return contract_for(structure, registry).is_base(structure)


def unwrap(structure: Any, registry: Optional[ContractRegistry] = None) -> Tuple[Any, Any]:
    """Split ``structure`` into ``(element, rest)``."""
    return contract_for(structure, registry).unwrap(structure)


def wrap(rest: Any, element: Any, registry: Optional[ContractRegistry] = None) -> Any:
    """Put ``element`` in front of ``rest``. Dispatches on the type of ``rest``."""
    return contract_for(rest, registry).wrap(rest, element)

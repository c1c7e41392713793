# recursion_schemes/core/exceptions.py
"""
All exceptions for recursion_schemes.

Hierarchy:
    RecursionSchemeError
    ├── ContractViolation - Contract misuse (unwrap on a base structure, lawless wrap)
    ├── ContractNotFoundError - No contract implementation for a type
    ├── ContractRegistryError - Invalid adapter registration
    │   └── DuplicateContractError - Two adapters claim the same name or type
    └── ConfigError - Configuration failures (see recursion_schemes.core.config)

The engines never raise these on their own account and never catch anything:
errors from caller-supplied functions propagate unmodified.
"""

# =============================================================================
# Base
# =============================================================================


class RecursionSchemeError(Exception):
    """Base error for recursion_schemes."""

    pass


# =============================================================================
# Contract Errors
# =============================================================================


class ContractViolation(RecursionSchemeError):
    """
    A Structure Contract operation was used outside its domain.

    Raised by contract implementations when ``unwrap`` is called on a base
    structure, or when a ``wrap`` would break the round-trip law.
    """

    pass


class ContractNotFoundError(RecursionSchemeError, TypeError):
    """Raised when no contract implementation exists for a structure's type."""

    pass


# =============================================================================
# Registry Errors
# =============================================================================


class ContractRegistryError(RecursionSchemeError):
    """Base error for contract registry operations."""

    pass


class DuplicateContractError(ContractRegistryError):
    """Raised when two adapters claim the same name or structure type."""

    pass

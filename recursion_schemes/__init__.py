"""
recursion_schemes - generic folds and unfolds for recursive data.

Recursion schemes factor the explicit recursion out of code that consumes
(folds) or produces (unfolds) recursively defined data. See "Functional
Programming with Bananas, Lenses, Envelopes and Barbed Wire" (Meijer,
Fokkinga, Paterson) for the paper that introduced them.

Quick Start:
    >>> from recursion_schemes import cata, ana, hylo
    >>> cata([3, 5, 2, 9], 0, lambda h, acc: h + acc)
    19
    >>> ana((1, []), lambda x: x > 5, lambda x: (x * x, x + 1))
    [1, 4, 9, 16, 25]
    >>> hylo((1, []), lambda x: x > 5, lambda x: (x * x, x + 1), 0, lambda h, acc: h + acc)
    55

Public API:
    Engines:
        - cata: catamorphism (fold); cata(initial, combine) returns a Catamorphism
        - ana: anamorphism (unfold); ana(finished, step) returns an Anamorphism
        - hylo: hylomorphism (unfold then fold); hylo(ana_fn, cata_fn) composes

    Structure Contract:
        - RecStruct: implement is_base/unwrap/wrap on your own type
        - register_contract: register an adapter for a type you don't own
        - ContractViolation: raised on contract misuse

Architecture:
    recursion_schemes/
    ├── core/          # Structure Contract, registry, laws, config, exceptions
    ├── schemes/       # cata, ana, hylo
    └── structures/    # ConsList + adapters for list, tuple, str, int

Unfolds are not guaranteed to terminate: if the stopping predicate never
returns True, ana and hylo never return.
"""

__version__ = "0.2.0"

# =============================================================================
# ENGINES
# =============================================================================

from recursion_schemes.schemes import (
    Anamorphism,
    Catamorphism,
    Hylomorphism,
    ana,
    cata,
    fold,
    hylo,
    unfold,
)

# =============================================================================
# CORE
# =============================================================================

from recursion_schemes.core import (
    CONTRACT_REGISTRY,
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ContractNotFoundError,
    ContractRegistry,
    ContractRegistryError,
    ContractViolation,
    DuplicateContractError,
    RecStruct,
    RecursionSchemeError,
    RecursionSchemesConfig,
    StructureContract,
    assert_round_trip,
    available_contract_adapters,
    bootstrap,
    build_registry,
    check_round_trip,
    contract_for,
    get_contract_adapter,
    is_base,
    load_config,
    load_yaml,
    register_contract,
    unwrap,
    wrap,
)

# =============================================================================
# STRUCTURES
# =============================================================================

from recursion_schemes.structures import ConsList

# =============================================================================
# LOGGING
# =============================================================================

from recursion_schemes.logging import configure_logging, get_logger

__all__ = [
    "__version__",
    # Engines
    "cata",
    "ana",
    "hylo",
    "fold",
    "unfold",
    "Catamorphism",
    "Anamorphism",
    "Hylomorphism",
    # Contract
    "RecStruct",
    "StructureContract",
    "contract_for",
    "is_base",
    "unwrap",
    "wrap",
    "check_round_trip",
    "assert_round_trip",
    # Registry
    "ContractRegistry",
    "CONTRACT_REGISTRY",
    "build_registry",
    "get_contract_adapter",
    "available_contract_adapters",
    "register_contract",
    # Structures
    "ConsList",
    # Configuration
    "RecursionSchemesConfig",
    "bootstrap",
    "load_config",
    "load_yaml",
    # Logging
    "configure_logging",
    "get_logger",
    # Exceptions
    "RecursionSchemeError",
    "ContractViolation",
    "ContractNotFoundError",
    "ContractRegistryError",
    "DuplicateContractError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]

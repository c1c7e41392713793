# recursion_schemes/core/__init__.py
"""
Core contracts for recursion_schemes.

Public API:
    - RecStruct: Protocol for types that implement the contract themselves
    - StructureContract: Protocol for adapters implementing it for other types
    - is_base / unwrap / wrap / contract_for: contract dispatch
    - ContractRegistry: adapter registry with auto-discovery
    - check_round_trip / assert_round_trip: contract law checks
    - Exceptions: standard error hierarchy
"""

# Exceptions
from .exceptions import (
    ContractNotFoundError,
    ContractRegistryError,
    ContractViolation,
    DuplicateContractError,
    RecursionSchemeError,
)

# Registry
from .registry import (
    CONTRACT_REGISTRY,
    ContractRegistry,
    available_contract_adapters,
    build_registry,
    get_contract_adapter,
    register_contract,
)

# Contract
from .contract import (
    MethodContract,
    RecStruct,
    StructureContract,
    contract_for,
    is_base,
    unwrap,
    wrap,
)

# Laws
from .laws import assert_round_trip, check_round_trip

# Configuration
from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    RecursionSchemesConfig,
    bootstrap,
    load_config,
    load_yaml,
)

__all__ = [
    # Contract
    "RecStruct",
    "StructureContract",
    "MethodContract",
    "contract_for",
    "is_base",
    "unwrap",
    "wrap",
    # Registry
    "ContractRegistry",
    "CONTRACT_REGISTRY",
    "build_registry",
    "get_contract_adapter",
    "available_contract_adapters",
    "register_contract",
    # Laws
    "check_round_trip",
    "assert_round_trip",
    # Configuration
    "RecursionSchemesConfig",
    "bootstrap",
    "load_config",
    "load_yaml",
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

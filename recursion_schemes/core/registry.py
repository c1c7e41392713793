# recursion_schemes/core/registry.py
"""
Contract Registry.

Maps structure types to the adapters that implement the Structure Contract
for them. Built-in types (list, tuple, str, int) cannot grow methods, so their
contract lives in adapter classes discovered from plugin packages:

    recursion_schemes.structures.plugins

An adapter is any class that carries a ``plugin_name``, a ``structure_type``
and the three contract operations ``is_base``, ``unwrap`` and ``wrap``.
Lookups by type walk the MRO, so an adapter for ``list`` also serves list
subclasses unless a more specific adapter is registered.
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type

from recursion_schemes.core.exceptions import (
    ContractNotFoundError,
    ContractRegistryError,
    DuplicateContractError,
)
from recursion_schemes.logging import get_logger
from recursion_schemes.logging_tags import REGISTRY

if TYPE_CHECKING:
    from recursion_schemes.core.config import RecursionSchemesConfig

logger = get_logger(__name__)

DEFAULT_SCAN_PACKAGES = ["recursion_schemes.structures.plugins"]

CONTRACT_METHODS = ("is_base", "unwrap", "wrap")


# =============================================================================
# ContractRegistry Class
# =============================================================================


@dataclass
class ContractRegistry:
    """
    Registry of Structure Contract adapters with lazy auto-discovery.

    Args:
        name: Registry name (for error messages)
        scan_packages: Package names to scan for adapter classes
        required_method: Method name that adapters must have
        plugin_name_attr: Attribute containing the adapter name
        type_attr: Attribute containing the type the adapter serves
        check_module_match: If True, only register classes defined in the scanned module
    """

    name: str
    scan_packages: List[str]
    required_method: str = "unwrap"
    plugin_name_attr: str = "plugin_name"
    type_attr: str = "structure_type"
    check_module_match: bool = True
    _plugins: Dict[str, Type[Any]] = field(default_factory=dict, repr=False)
    _by_type: Dict[type, Type[Any]] = field(default_factory=dict, repr=False)
    _type_cache: Dict[type, Optional[Type[Any]]] = field(default_factory=dict, repr=False)
    _discovered: bool = field(default=False, repr=False)

    def get(self, plugin_name: str) -> Type[Any]:
        """Get an adapter by name."""
        self._ensure_discovered()

        if plugin_name not in self._plugins:
            available = sorted(self._plugins.keys())
            raise ContractNotFoundError(
                f"Unknown {self.name} adapter: {plugin_name!r}. Available: {available}"
            )

        return self._plugins[plugin_name]

    def for_type(self, tp: type) -> Optional[Type[Any]]:
        """
        Get the adapter serving ``tp``, or None.

        The most specific registered type in ``tp.__mro__`` wins.
        """
        self._ensure_discovered()

        try:
            return self._type_cache[tp]
        except KeyError:
            pass

        adapter = None
        for base in getattr(tp, "__mro__", (tp,)):
            if base in self._by_type:
                adapter = self._by_type[base]
                break

        self._type_cache[tp] = adapter
        return adapter

    def list_available(self) -> List[str]:
        """List all available adapter names."""
        self._ensure_discovered()
        return sorted(self._plugins.keys())

    def register(self, adapter_class: Type[Any]) -> Type[Any]:
        """
        Manually register an adapter class.

        Returns the class so this can be used as a decorator.
        """
        for method in CONTRACT_METHODS:
            if not callable(getattr(adapter_class, method, None)):
                raise ContractRegistryError(
                    f"{self.name} adapter {adapter_class.__name__} missing required "
                    f"method {method!r}"
                )

        for attr in (self.plugin_name_attr, self.type_attr):
            if not hasattr(adapter_class, attr):
                raise ContractRegistryError(
                    f"{self.name} adapter {adapter_class.__name__} missing required "
                    f"attribute {attr!r}"
                )

        name = getattr(adapter_class, self.plugin_name_attr)
        structure_type = getattr(adapter_class, self.type_attr)

        if not isinstance(structure_type, type):
            raise ContractRegistryError(
                f"{self.name} adapter {adapter_class.__name__} has non-type "
                f"{self.type_attr}: {structure_type!r}"
            )

        existing = self._plugins.get(name)
        if existing is not None:
            if existing is adapter_class:
                return adapter_class
            raise DuplicateContractError(
                f"Duplicate {self.name} adapter: {name!r}. "
                f"Found in {existing.__module__} and {adapter_class.__module__}"
            )

        claimed = self._by_type.get(structure_type)
        if claimed is not None:
            raise DuplicateContractError(
                f"Duplicate {self.name} adapter for type {structure_type.__name__}: "
                f"{getattr(claimed, self.plugin_name_attr)!r} and {name!r}"
            )

        self._plugins[name] = adapter_class
        self._by_type[structure_type] = adapter_class
        self._type_cache.clear()
        logger.debug(f"{REGISTRY} Registered {self.name} adapter: {name!r}")
        return adapter_class

    def _ensure_discovered(self) -> None:
        """Run auto-discovery if not already done."""
        if self._discovered:
            return

        # Set first: scanned modules may register themselves on import.
        self._discovered = True

        try:
            for package_name in self.scan_packages:
                try:
                    package = importlib.import_module(package_name)
                except ImportError as e:
                    logger.debug(f"{REGISTRY} Could not import {package_name}: {e}")
                    continue

                self._scan_package(package)
        except BaseException:
            self._discovered = False
            raise

        self._type_cache.clear()
        logger.debug(
            f"{REGISTRY} Discovered {len(self._plugins)} {self.name} adapter(s): "
            f"{sorted(self._plugins.keys())}"
        )

    def _scan_package(self, package: Any) -> None:
        """Scan a package for adapter classes (non-recursive)."""
        package_path = getattr(package, "__path__", None)
        if not package_path:
            self._scan_module(package)
            return

        for _importer, modname, ispkg in pkgutil.iter_modules(
            package_path, prefix=f"{package.__name__}."
        ):
            if ispkg:
                continue

            try:
                module = importlib.import_module(modname)
            except Exception as e:
                logger.debug(f"{REGISTRY} Could not import {modname}: {e}")
                continue

            self._scan_module(module)

    def _scan_module(self, module: Any) -> None:
        """Scan a module for adapter classes."""
        for name in dir(module):
            if name.startswith("_"):
                continue

            obj = getattr(module, name)

            if not isinstance(obj, type):
                continue

            if not hasattr(obj, self.required_method):
                continue

            if not hasattr(obj, self.plugin_name_attr):
                continue

            if self.check_module_match and obj.__module__ != module.__name__:
                continue

            try:
                self.register(obj)
            except ContractRegistryError as e:
                logger.debug(f"{REGISTRY} Skipping {name}: {e}")


# =============================================================================
# Pre-configured Registry
# =============================================================================


CONTRACT_REGISTRY = ContractRegistry(
    name="contract",
    scan_packages=list(DEFAULT_SCAN_PACKAGES),
)


def build_registry(config: "RecursionSchemesConfig") -> ContractRegistry:
    """
    Build a registry that scans the built-in adapters plus the packages
    named in ``config.registry.scan_packages``.
    """
    packages = list(DEFAULT_SCAN_PACKAGES)
    for package_name in config.registry.scan_packages:
        if package_name not in packages:
            packages.append(package_name)

    return ContractRegistry(name="contract", scan_packages=packages)


# =============================================================================
# Convenience Functions
# =============================================================================


def get_contract_adapter(plugin_name: str) -> Type[Any]:
    """Get a contract adapter from the default registry by name."""
    return CONTRACT_REGISTRY.get(plugin_name)


def available_contract_adapters() -> List[str]:
    """List adapters available in the default registry."""
    return CONTRACT_REGISTRY.list_available()


def register_contract(adapter_class: Type[Any]) -> Type[Any]:
    """Register an adapter with the default registry. Usable as a decorator."""
    return CONTRACT_REGISTRY.register(adapter_class)

# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: Pure logic, no I/O (engines, contract, registry)
- tier2: Filesystem or environment (config loading, adapter discovery from disk)
"""

from __future__ import annotations

from typing import Any, Callable, List

import pytest

from recursion_schemes.core.registry import DEFAULT_SCAN_PACKAGES, ContractRegistry

TIER2_MODULES = ("test_config", "test_registry_discovery")


def pytest_collection_modifyitems(items):
    """Mark every test tier1 unless its module touches the filesystem."""
    for item in items:
        module = item.path.stem
        if module in TIER2_MODULES:
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)


# =============================================================================
# Registries
# =============================================================================


@pytest.fixture
def registry() -> ContractRegistry:
    """A registry isolated from the module-level default."""
    return ContractRegistry(name="test", scan_packages=list(DEFAULT_SCAN_PACKAGES))


@pytest.fixture
def empty_registry() -> ContractRegistry:
    """A registry with nothing to discover."""
    return ContractRegistry(name="empty", scan_packages=[])


# =============================================================================
# Call recording
# =============================================================================


class CallLog:
    """Records calls of wrapped functions, in order."""

    def __init__(self):
        self.calls: List[tuple] = []

    def wrap(self, name: str, fn: Callable[..., Any]) -> Callable[..., Any]:
        def recorded(*args):
            self.calls.append((name, *args))
            return fn(*args)

        return recorded

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


# =============================================================================
# Adapter package on disk
# =============================================================================


ADAPTER_MODULE = '''
from recursion_schemes.core.exceptions import ContractViolation


class Countdown:
    def __init__(self, n):
        self.n = n


class CountdownContract:
    plugin_name = "countdown"
    structure_type = Countdown

    @staticmethod
    def is_base(structure):
        return structure.n == 0

    @staticmethod
    def unwrap(structure):
        if structure.n == 0:
            raise ContractViolation("countdown finished")
        return structure.n, Countdown(structure.n - 1)

    @staticmethod
    def wrap(rest, element):
        return Countdown(rest.n + 1)
'''


@pytest.fixture
def adapter_package(tmp_path, monkeypatch):
    """
    Write an importable package holding one adapter module.

    Returns the package name.
    """
    package_name = "extra_structures_for_tests"
    package_dir = tmp_path / package_name
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "countdown.py").write_text(ADAPTER_MODULE, encoding="utf-8")
    (package_dir / "broken.py").write_text("import does_not_exist_anywhere\n", encoding="utf-8")
    (package_dir / "a_raises.py").write_text(
        "raise RuntimeError(\"adapter module failed\")\n", encoding="utf-8"
    )

    monkeypatch.syspath_prepend(str(tmp_path))
    yield package_name

    import sys

    for name in list(sys.modules):
        if name == package_name or name.startswith(f"{package_name}."):
            del sys.modules[name]

# recursion_schemes/structures/__init__.py
"""
Reference Structure Contract implementations.

- ConsList: implements the contract directly
- plugins/: adapters for list, tuple, str and int (discovered by the registry)
"""

from .cons import ConsList

__all__ = ["ConsList"]

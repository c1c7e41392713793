# recursion_schemes/schemes/__init__.py
"""
The recursion-scheme engines.

- cata: fold a structure (catamorphism)
- ana: unfold a structure from a seed (anamorphism)
- hylo: unfold then fold (hylomorphism)
"""

from .ana import Anamorphism, ana, unfold
from .cata import Catamorphism, cata, fold
from .hylo import Hylomorphism, hylo

__all__ = [
    "cata",
    "fold",
    "Catamorphism",
    "ana",
    "unfold",
    "Anamorphism",
    "hylo",
    "Hylomorphism",
]

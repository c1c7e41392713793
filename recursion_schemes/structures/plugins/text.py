# recursion_schemes/structures/plugins/text.py
"""String adapter: a string is a sequence of one-character strings."""

from __future__ import annotations

from typing import Tuple

from recursion_schemes.core.exceptions import ContractViolation


class TextContract:
    """
    Structure Contract for ``str``: base is ``""``.

    Only single characters can be wrapped; anything else would break
    ``unwrap(wrap(rest, element)) == (element, rest)``.
    """

    plugin_name = "str"
    structure_type = str

    @staticmethod
    def is_base(structure: str) -> bool:
        return structure == ""

    @staticmethod
    def unwrap(structure: str) -> Tuple[str, str]:
        if not structure:
            raise ContractViolation("Cannot unwrap an empty string")
        return structure[0], structure[1:]

    @staticmethod
    def wrap(rest: str, element: str) -> str:
        if not isinstance(element, str) or len(element) != 1:
            raise ContractViolation(
                f"Can only wrap a single character onto a string, got {element!r}"
            )
        return element + rest

# core/utils.py

"""
Repository for program-wide utilities.
"""

from typing import Any


def require_non_null(value: Any, name: str = "argument") -> Any:
    """
    Guards a single argument against None.

    Raises:
        TypeError: If `value` is None.
    """
    if value is None:
        raise TypeError(f"Missing required argument: {name} must not be None.")
    return value


def require_all_non_null(**values: Any) -> None:
    """
    Guards every keyword argument against None, checking all before any work is done.

    Raises:
        TypeError: Naming every argument that was None.
    """
    missing = [name for name, value in values.items() if value is None]
    if missing:
        raise TypeError(
            f"Missing required arguments: {', '.join(missing)} must not be None."
        )


def normalize(text: str) -> str:
    return text.strip().lower()

"""
# Yapp: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from typing import Optional


def none_to_empty_string(string: Optional[str]) -> str:
    if string is None:
        return ''

    return string


def sort_longest_first(patterns: list[str]) -> list[str]:
    """
    Sort patterns by descending length.

    The sort is stable, so patterns of equal length keep their original relative order.
    """
    return sorted(patterns, key=len, reverse=True)

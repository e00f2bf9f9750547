"""Column label arithmetic.

Converts between 1-based column indexes and spreadsheet column labels
(A, B, ..., Z, AA, ...). Labels use bijective base-26: there is no zero
digit, so the value after Z is AA. Length is unbounded.

Index 0 maps to EMPTY_COLUMN, the label of a sheet with no used columns.
"""

from __future__ import annotations

from typing import Literal

EMPTY_COLUMN = ""

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_BASE = 26


def index_to_label(index: int) -> str:
    """Convert a column index to its label.

    Args:
        index: Column index, 1-based. 0 yields EMPTY_COLUMN.

    Returns:
        Column label (e.g., 1 -> "A", 27 -> "AA", 703 -> "AAA").

    Raises:
        ValueError: If index is negative.
    """
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")

    letters: list[str] = []
    remaining = index
    while remaining > 0:
        remaining, digit = divmod(remaining - 1, _BASE)
        letters.append(_ALPHABET[digit])
    return "".join(reversed(letters))


def label_to_index(label: str) -> int:
    """Convert a column label to its 1-based index.

    Args:
        label: Upper-case column label. EMPTY_COLUMN yields 0.

    Returns:
        Column index.

    Raises:
        ValueError: If label contains anything other than A-Z.
    """
    index = 0
    for char in label:
        digit = _ALPHABET.find(char)
        if digit < 0:
            raise ValueError(f"Invalid column label: {label!r}")
        index = index * _BASE + digit + 1
    return index


def compare(a: str, b: str) -> Literal[-1, 0, 1]:
    """Order two column labels by their index.

    Returns:
        -1 if a comes before b, 0 if equal, 1 if a comes after b.
    """
    left = label_to_index(a)
    right = label_to_index(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def max_label(a: str, b: str) -> str:
    """Return the later of two column labels."""
    return b if compare(b, a) > 0 else a


def next_label(label: str) -> str:
    """Return the label of the column after label."""
    return index_to_label(label_to_index(label) + 1)


def label_range(last: str) -> list[str]:
    """List every label from "A" up to and including last.

    Args:
        last: Final label. EMPTY_COLUMN yields an empty list.

    Returns:
        Labels in increasing order.
    """
    return [index_to_label(i) for i in range(1, label_to_index(last) + 1)]


__all__ = [
    "EMPTY_COLUMN",
    "compare",
    "index_to_label",
    "label_range",
    "label_to_index",
    "max_label",
    "next_label",
]

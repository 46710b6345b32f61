"""
Stage 2 — TABLE: Rotated substitution square
=============================================
The table is 26 rows. Row 0 is the permuted alphabet; every following
row is the row above it shifted one place left, the first letter wrapping
round to the end.

    row 0   GLYPHABCDEFIJKMNOQRSTUVWXZ
    row 1   LYPHABCDEFIJKMNOQRSTUVWXZG
    row 2   YPHABCDEFIJKMNOQRSTUVWXZGL
    ...

Rows are materialised by rotating one working copy step by step, so each
row is derived from the previous one rather than recomputed from row 0.
"""

from typing import Tuple

from ..errors import InvalidAlphabet
from .stage1_alphabet import ALPHA

Table = Tuple[str, ...]


def check_alphabet(alphabet: str) -> str:
    """Raise InvalidAlphabet unless ``alphabet`` is a permutation of A-Z."""
    if len(alphabet) != len(ALPHA):
        raise InvalidAlphabet(
            f"Alphabet must have {len(ALPHA)} symbols, got {len(alphabet)}."
        )
    if len(set(alphabet)) != len(ALPHA):
        raise InvalidAlphabet(f"Alphabet has repeated symbols: {alphabet!r}.")
    if set(alphabet) != set(ALPHA):
        raise InvalidAlphabet(f"Alphabet must use only letters A-Z: {alphabet!r}.")
    return alphabet


def build_table(alphabet: str) -> Table:
    """Build the 26-row table whose first row is ``alphabet``."""
    check_alphabet(alphabet)
    working = list(alphabet)
    rows = ["".join(working)]
    for _ in range(len(working) - 1):
        first = working.pop(0)
        working.append(first)
        rows.append("".join(working))
    return tuple(rows)

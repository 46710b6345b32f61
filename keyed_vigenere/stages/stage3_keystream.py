"""
Stage 3 — KEYSTREAM: Key alignment
===================================
The key is stretched to the plaintext's full length, counting every
character of the plaintext, letters or not. Extra characters are drawn
from the original key in order, starting over at its first letter each
time it runs out:

    SATOR, 13  ->  SATORSATORSAT

A key that is already long enough comes back untouched; the engine only
reads as many positions as the plaintext has.
"""

from ..errors import InvalidKey


def expand_keystream(key: str, target_length: int) -> str:
    if target_length < 0:
        raise ValueError("target_length must be non-negative.")
    if len(key) >= target_length:
        return key
    if not key:
        raise InvalidKey("Key must not be empty when there is text to encrypt.")
    missing = target_length - len(key)
    return key + "".join(key[i % len(key)] for i in range(missing))

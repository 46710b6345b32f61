"""
Stage 1 — ALPHABET: Keyword-permuted alphabet
==============================================
Every keyed Vigenère table starts from one mixed alphabet. The keyword's
distinct letters go to the front in the order they first appear, and the
rest of A-Z follows in its usual order.

    GLYPH    ->  GLYPH ABCDEFIJKMNOQRSTUVWXZ
    HELLO    ->  HELO  ABCDFGIJKMNPQRSTUVWXYZ

The keyword is walked from its last letter back to its first; each letter
is pulled out of the working alphabet and pushed onto the front. A letter
seen again later in that walk (i.e. earlier in the keyword) is pushed
ahead of where it was, so the first occurrence wins.
"""

import string

from ..errors import InvalidKeyword

ALPHA = string.ascii_uppercase


def normalize_keyword(keyword: str) -> str:
    """Upper-case a keyword, rejecting anything that is not A-Z."""
    if not keyword:
        raise InvalidKeyword("Keyword must not be empty.")
    if not (keyword.isascii() and keyword.isalpha()):
        raise InvalidKeyword(f"Keyword must contain only letters A-Z, got {keyword!r}.")
    return keyword.upper()


def permute_alphabet(keyword: str) -> str:
    """Return the 26-letter alphabet seeded by ``keyword``."""
    keyword = normalize_keyword(keyword)
    alphabet = list(ALPHA)
    for ch in reversed(keyword):
        if ch in alphabet:
            alphabet.remove(ch)
        alphabet.insert(0, ch)
    return "".join(alphabet)

"""
keyed_vigenere — Keyed Vigenère cipher
=======================================
A polyalphabetic substitution cipher built on a keyword-mixed alphabet.

Stages:
    1  ALPHABET   — keyword letters first, rest of A-Z after
    2  TABLE      — 26 rows, each the previous one rotated left
    3  KEYSTREAM  — key repeated to the plaintext's length
       ENGINE     — plaintext letter picks the row, key letter the column

Classical and not secure. Encryption only.
"""

__version__ = "1.0.0"

from .errors import (
    CipherError,
    InvalidKeyword,
    InvalidAlphabet,
    InvalidKey,
    CharacterNotFound,
    KeyStreamTooShort,
    TableNotBuilt,
)
from .stages.stage1_alphabet import permute_alphabet
from .stages.stage2_table    import build_table
from .stages.stage3_keystream import expand_keystream
from .engine                 import CipherEngine, EngineState
from .render                 import format_table, USAGE

__all__ = [
    "CipherEngine",
    "EngineState",
    "permute_alphabet",
    "build_table",
    "expand_keystream",
    "format_table",
    "USAGE",
    "CipherError",
    "InvalidKeyword",
    "InvalidAlphabet",
    "InvalidKey",
    "CharacterNotFound",
    "KeyStreamTooShort",
    "TableNotBuilt",
]

"""
Errors raised by keyed_vigenere.

Every input problem is a CipherError (a ValueError), so callers that
already guard with ``except ValueError`` keep working. TableNotBuilt is
also a RuntimeError: the input was fine, the engine just has no table yet.
"""


class CipherError(ValueError):
    """Base class for every keyed_vigenere error."""


class InvalidKeyword(CipherError):
    """Keyword is empty or holds something other than A-Z letters."""


class InvalidAlphabet(CipherError):
    """Alphabet is not 26 distinct letters of A-Z."""


class InvalidKey(CipherError):
    """Key cannot produce a keystream (empty key, non-zero length)."""


class CharacterNotFound(CipherError):
    """A letter to be substituted is missing from the lookup alphabet."""

    def __init__(self, char: str, position: int, role: str = "plaintext"):
        self.char = char
        self.position = position
        self.role = role
        super().__init__(
            f"{role} character {char!r} at position {position} "
            f"is not in the lookup alphabet."
        )


class KeyStreamTooShort(CipherError):
    """Expanded keystream does not cover the plaintext."""

    def __init__(self, have: int, need: int):
        self.have = have
        self.need = need
        super().__init__(f"Keystream has {have} characters, plaintext needs {need}.")


class TableNotBuilt(CipherError, RuntimeError):
    """Encryption was requested before any table was built."""

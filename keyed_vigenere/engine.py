"""
CipherEngine — keyed Vigenère encryption
=========================================
Ties the three stages together: keyword -> alphabet -> table, and
key -> keystream, then reads one table cell per plaintext letter.

The lookup is asymmetric. The plaintext letter's position
in the permuted alphabet picks the ROW, the keystream letter's position
picks the COLUMN:

    alphabet  GLYPHABCDEFIJKMNOQRSTUVWXZ
    'A' -> row 5, 'S' -> column 19, table[5][19] == 'X'

Non-letters are copied through and still occupy their keystream slot,
so the key stays aligned by position, not by letter count.

An engine is either UNCONFIGURED (no table) or READY (table built for
one keyword). Building again replaces the table outright.
"""

import enum
import logging
import string
import threading
from typing import Optional

from .errors import CharacterNotFound, KeyStreamTooShort, TableNotBuilt
from .stages.stage1_alphabet import permute_alphabet
from .stages.stage2_table import Table, build_table
from .stages.stage3_keystream import expand_keystream

logger = logging.getLogger(__name__)

# ASCII only: str.upper() can change length ("ß" -> "SS") and break alignment.
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class EngineState(enum.Enum):
    UNCONFIGURED = "unconfigured"
    READY = "ready"


class CipherEngine:
    """
    Keyed Vigenère cipher engine.

    Pass ``keyword`` to start READY, or call ``build_table`` later.
    With ``normalize_case`` off, lower-case letters are not looked up
    in upper case and raise CharacterNotFound instead.
    """

    DEFAULT_KEYWORD = "GLYPH"
    DEFAULT_KEY = "SATOR"

    def __init__(self, keyword: Optional[str] = None, normalize_case: bool = True):
        self._lock = threading.RLock()
        self._normalize_case = normalize_case
        self._keyword = None
        self._table = None
        if keyword is not None:
            self.build_table(keyword)

    # ── state ────────────────────────────────────────────────────────────────
    @property
    def state(self) -> EngineState:
        return EngineState.READY if self._table is not None else EngineState.UNCONFIGURED

    @property
    def is_ready(self) -> bool:
        return self._table is not None

    @property
    def normalize_case(self) -> bool:
        return self._normalize_case

    @property
    def keyword(self) -> Optional[str]:
        return self._keyword

    @property
    def table(self) -> Table:
        if self._table is None:
            raise TableNotBuilt("No table built. Call build_table(keyword) first.")
        return self._table

    @property
    def alphabet(self) -> str:
        return self.table[0]

    # ── build ────────────────────────────────────────────────────────────────
    def build_table(self, keyword: str) -> Table:
        """
        Build and store the table for ``keyword``, replacing any previous one.
        Raises InvalidKeyword without touching the current table.
        """
        with self._lock:
            table = build_table(permute_alphabet(keyword))
            if self._table is None:
                logger.info("Table built for keyword %s: %s", keyword.upper(), table[0])
            else:
                logger.info(
                    "Table rebuilt for keyword %s (was %s): %s",
                    keyword.upper(), self._keyword, table[0],
                )
            self._keyword = keyword.upper()
            self._table = table
            return table

    # ── encrypt ──────────────────────────────────────────────────────────────
    def encrypt(self, plaintext: str, key: str) -> str:
        """
        Encrypt with the table already built. Non-letters pass through.
        Raises TableNotBuilt if no keyword has been set.
        """
        with self._lock:
            table = self.table
            if self._normalize_case:
                plaintext = plaintext.translate(_UPPER)
                key = key.translate(_UPPER)
            keystream = expand_keystream(key, len(plaintext))
            if len(keystream) < len(plaintext):
                raise KeyStreamTooShort(len(keystream), len(plaintext))

            alphabet = table[0]
            result = []
            for i, ch in enumerate(plaintext):
                if not ch.isalpha():
                    result.append(ch)
                    continue
                row = alphabet.find(ch)
                if row < 0:
                    raise CharacterNotFound(ch, i)
                col = alphabet.find(keystream[i])
                if col < 0:
                    raise CharacterNotFound(keystream[i], i, role="keystream")
                result.append(table[row][col])

            logger.debug(
                "Encrypted %d characters with keyword %s (key length %d)",
                len(plaintext), self._keyword, len(key),
            )
            return "".join(result)

    def encrypt_default(self, plaintext: str) -> str:
        """Rebuild the table from DEFAULT_KEYWORD and encrypt with DEFAULT_KEY."""
        with self._lock:
            self.build_table(self.DEFAULT_KEYWORD)
            return self.encrypt(plaintext, self.DEFAULT_KEY)

    def encrypt_with_keyword(self, plaintext: str, key: str, keyword: str) -> str:
        """Build the table for ``keyword`` and encrypt, with no rebuild in between."""
        with self._lock:
            self.build_table(keyword)
            return self.encrypt(plaintext, key)

    def __repr__(self):
        return f"CipherEngine({self.state.value}, keyword={self._keyword!r})"

"""
Text rendering for tables, plus the static usage text.
"""

from typing import Sequence

from .stages.stage1_alphabet import ALPHA

USAGE = """\
keyed_vigenere — keyed Vigenère cipher
=======================================

  1. Build a table from a keyword:

        engine = CipherEngine()
        engine.build_table("KRYPTOS")

     The keyword's distinct letters lead the alphabet, the rest of A-Z
     follows in order, and each of the 26 rows is the one above it
     rotated one place left.

  2. Encrypt with a key:

        engine.encrypt("ATTACK AT DAWN", "SATOR")

     The key repeats to the length of the text. Each plaintext letter
     picks a row, the key letter at the same position picks a column.
     Spaces, digits and punctuation pass through unchanged.

  3. Or use the built-in keyword GLYPH and key SATOR:

        engine.encrypt_default("HELLO, WORLD!")

  From the shell:

        python -m keyed_vigenere table KRYPTOS
        python -m keyed_vigenere encrypt "HELLO, WORLD!"
        python -m keyed_vigenere encrypt "ATTACK AT DAWN" --keyword KRYPTOS --key SATOR

  There is no decryption.
"""


def format_table(table: Sequence[str]) -> str:
    """Render a table as a grid, each row labelled with the letter for its index."""
    lines = [" " * 7 + ALPHA, ""]
    for label, row in zip(ALPHA, table):
        lines.append(f"    {label}  {row}")
    return "\n".join(lines)

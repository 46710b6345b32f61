"""
keyed_vigenere — Live Demo
===========================
Run:  python examples/demo_keyed_table.py

Builds tables for a few keywords, prints one in full, and encrypts a
message with the default and an explicit keyword/key pair.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from keyed_vigenere import CipherEngine, permute_alphabet, format_table, CipherError

LINE = "═" * 70
MSG  = "HELLO, WORLD!"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  keyed_vigenere — Keyed Vigenère Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── ALPHABETS ────────────────────────────────────────────────────────────────
header("Stage 1", "ALPHABET — keyword letters first")
for kw in ("GLYPH", "KRYPTOS", "HELLO", "MISSISSIPPI"):
    ok(f"{kw:<12}", permute_alphabet(kw))

# ── TABLE ────────────────────────────────────────────────────────────────────
header("Stage 2", "TABLE — KRYPTOS")
engine = CipherEngine("KRYPTOS")
print(format_table(engine.table))

# ── ENCRYPT ──────────────────────────────────────────────────────────────────
header("Engine", "ENCRYPT")
ok("Default (GLYPH / SATOR)", engine.encrypt_default(MSG))
ok("Keyword now", engine.keyword)
ok("KRYPTOS / SATOR", engine.encrypt_with_keyword("ATTACK AT DAWN", "SATOR", "KRYPTOS"))

strict = CipherEngine("GLYPH", normalize_case=False)
try:
    strict.encrypt("hello", "SATOR")
except CipherError as e:
    ok("Strict case rejects lower case", e)

print(f"\n{LINE}\n")

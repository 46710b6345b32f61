"""
Command line for keyed_vigenere.

    python -m keyed_vigenere table KRYPTOS
    python -m keyed_vigenere alphabet GLYPH
    python -m keyed_vigenere encrypt "HELLO, WORLD!"
    python -m keyed_vigenere encrypt "ATTACK AT DAWN" --keyword KRYPTOS --key SATOR
    python -m keyed_vigenere usage
"""

import argparse
import logging
import sys

from .engine import CipherEngine
from .errors import CipherError
from .render import USAGE, format_table
from .stages.stage1_alphabet import permute_alphabet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="keyed_vigenere",
        description="Keyed Vigenère cipher: build tables and encrypt text.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log table builds and encryption details")
    sub = p.add_subparsers(dest="cmd", required=True)

    tbl = sub.add_parser("table", help="Print the 26-row table for a keyword")
    tbl.add_argument("keyword", nargs="?", default=CipherEngine.DEFAULT_KEYWORD,
                     help=f"Keyword (default {CipherEngine.DEFAULT_KEYWORD})")

    alp = sub.add_parser("alphabet", help="Print the permuted alphabet for a keyword")
    alp.add_argument("keyword", help="Keyword")

    enc = sub.add_parser("encrypt", help="Encrypt text")
    enc.add_argument("text", help="Plaintext")
    enc.add_argument("--keyword", help=f"Table keyword (default {CipherEngine.DEFAULT_KEYWORD})")
    enc.add_argument("--key", help=f"Keystream key (default {CipherEngine.DEFAULT_KEY})")
    enc.add_argument("--strict-case", action="store_true",
                     help="Reject lower-case letters instead of upper-casing them")

    sub.add_parser("usage", help="Show how to use the library")
    return p


def run(args: argparse.Namespace) -> str:
    if args.cmd == "table":
        engine = CipherEngine(args.keyword)
        return format_table(engine.table)
    if args.cmd == "alphabet":
        return permute_alphabet(args.keyword)
    if args.cmd == "encrypt":
        engine = CipherEngine(normalize_case=not args.strict_case)
        if args.keyword is None and args.key is None:
            return engine.encrypt_default(args.text)
        return engine.encrypt_with_keyword(
            args.text,
            args.key if args.key is not None else CipherEngine.DEFAULT_KEY,
            args.keyword if args.keyword is not None else CipherEngine.DEFAULT_KEYWORD,
        )
    return USAGE


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=' %(message)s')
    try:
        print(run(args))
    except CipherError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Terminal front end for the transposition cipher.

Reads the secret and the key from stdin, then runs every -e / -d flag in
the order given and prints the standardized input, the grid, the sorted
key and the result.

Usage:
    python cli.py -e      (encrypt)
    python cli.py -d      (decrypt)
"""
import argparse
import sys

from settings import MAX_LENGTH
from transposition import (EncodeResult, DecodeResult, InvalidInput, EmptyKey,
                           encode, decode)

# ===============================
# Output
# ===============================

def _print_grid(result) -> None:
    grid = result.grid
    print(f"Matrix (rows x cols = {grid.rows} x {grid.cols}):")
    for i, row in enumerate(grid.row_strings(), start=1):
        print(f"Row {i}: {row}")
    pairs = " ".join(f"{ch}:{idx}" for ch, idx in result.ranked_key)
    print(f"Sorted key chars (char:index): {pairs} ")


def print_encryption(result: EncodeResult) -> None:
    print(f"Standardized Plain: {result.text}")
    print(f"Standardized Key  : {result.key}")
    _print_grid(result)
    print(f"Ciphertext: {result.ciphertext}")


def print_decryption(result: DecodeResult) -> None:
    if result.warning is not None:
        print(f"Warning: {result.warning}", file=sys.stderr)
    print(f"Standardized Key  : {result.key}")
    _print_grid(result)
    print(f"Plaintext: {result.plaintext}")

# ===============================
# Input
# ===============================

def read_line(prompt: str, max_len: int = MAX_LENGTH) -> str:
    """Prompt on stdout and read one line; anything past max_len is dropped."""
    line = input(prompt)
    return line[:max_len]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="transposition",
                                description="Columnar transposition cipher")
    p.add_argument("-e", dest="modes", action="append_const", const="e",
                   help="encrypt the secret")
    p.add_argument("-d", dest="modes", action="append_const", const="d",
                   help="decrypt the secret")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        text = read_line(f"Type the secret (max {MAX_LENGTH} chars): ")
        key = read_line("Type the key: ")
    except EOFError:
        print("Error: no input", file=sys.stderr)
        return 1

    if not args.modes:
        prog = parser.prog
        print(f"Usage: {prog} -e  (encrypt)\n       {prog} -d  (decrypt)")
        return 0

    for mode in args.modes:
        try:
            if mode == "e":
                print_encryption(encode(text, key))
            else:
                print_decryption(decode(text, key))
        except (InvalidInput, EmptyKey) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

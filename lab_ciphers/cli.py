"""
Interactive console for the lab ciphers
=======================================
Run:  python -m lab_ciphers [--cipher gronsfeld|permutation] [--key KEY] [-v]

Reads a key, then loops on a menu:
    0  exit
    1  encrypt a line
    2  decrypt a line

A bad key ends the session with exit status 1. A bad line of text
prints the message and returns to the menu.
"""

import argparse
import logging
import sys

from lab_ciphers.ciphers.gronsfeld import GronsfeldCipher
from lab_ciphers.ciphers.permutation import PermutationCipher
from lab_ciphers.errors import InvalidKeyError, InvalidTextError

logger = logging.getLogger(__name__)

CIPHERS = {
    "gronsfeld":   GronsfeldCipher,
    "permutation": PermutationCipher,
}

KEY_PROMPTS = {
    "gronsfeld":   "Enter key (Russian uppercase letters): ",
    "permutation": "Enter key (positive integer): ",
}

MENU = "Choose operation (0 - exit, 1 - encrypt, 2 - decrypt): "


def run_session(cipher, input_fn=input, out=None) -> None:
    """
    Menu loop over an already-built cipher.
    Returns on choice 0 or end of input.
    """
    out = out or sys.stdout
    while True:
        try:
            choice = input_fn(MENU).strip()
        except EOFError:
            return
        if choice == "0":
            return
        if choice not in ("1", "2"):
            print("Invalid operation. Please choose 0, 1 or 2.", file=out)
            continue
        try:
            text = input_fn("Enter text: ")
        except EOFError:
            return
        try:
            if choice == "1":
                print(f"Encrypted text: {cipher.encrypt(text)}", file=out)
            else:
                print(f"Decrypted text: {cipher.decrypt(text)}", file=out)
        except InvalidTextError as e:
            print(f"Error: {e}", file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lab-ciphers",
        description="Gronsfeld and route-permutation ciphers (educational).",
    )
    parser.add_argument("--cipher", choices=sorted(CIPHERS), default="permutation",
                        help="cipher to use (default: permutation)")
    parser.add_argument("--key", help="key descriptor; prompted for if omitted")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log cipher activity to stderr")
    return parser


def main(argv=None, input_fn=input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=" %(message)s")

    key = args.key
    if key is None:
        try:
            key = input_fn(KEY_PROMPTS[args.cipher])
        except EOFError:
            return 1

    try:
        cipher = CIPHERS[args.cipher](key)
    except InvalidKeyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Session started: {cipher!r}")
    run_session(cipher, input_fn=input_fn)
    return 0


if __name__ == "__main__":
    sys.exit(main())

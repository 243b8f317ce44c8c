"""Demonstration driver for the toy RSA package.

Generates a key pair, encrypts a plaintext with the public half, decrypts it with the private half and reports whether
the text survived. Nothing is written to disk; the flags only tune the demonstration.

Typical usage example:

    toyrsa
    OR
    python -m toyrsa --seed 42 --plaintext "Hi there!"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import random
import sys
import typing
import warnings

import toyrsa

logger = logging.getLogger("toyrsa.cli")

DEMO_TEXT = ("Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore et "
             "dolore magna aliqua")

corep = argparse.ArgumentParser(prog="toyrsa", description="Round-trip a message through a freshly generated toy key.")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--plaintext", "-t", default=DEMO_TEXT, help="Plaintext to round-trip.")
corep.add_argument("--seed", "-s", type=int, help="Seed a deterministic random source for keys and padding")
corep.add_argument("--verbose", "-V", action="store_true", help="Log debug output to stderr")


def run_demo(plaintext: str, rng: random.Random | None = None, prntr: typing.Callable = print) -> bool:
    """Generate keys, encrypt `plaintext`, decrypt it again and report on the round trip.

    Args:
        plaintext: The text to round-trip.
        rng: Random source for key generation and padding. Defaults to the package default.
        prntr: Output callable for the progress lines.

    Returns:
        True if the decrypted text equals `plaintext`.

    Raises:
        KeyGenerationError: If no key pair could be generated.
    """
    warnings.warn("Toy RSA keys are trivially breakable! Please use for demonstration only.", RuntimeWarning)
    priv, pub = toyrsa.generate_key_pair(rng)
    prntr(f"Private key: {tuple(priv)}, public key: {tuple(pub)}")
    ciph = toyrsa.encrypt(plaintext, pub, rng)
    logger.debug("Encrypted %d byte(s)", len(ciph))
    clear = toyrsa.decrypt(ciph, priv)
    prntr(f"Decrypted plaintext: {clear}")
    return clear == plaintext


def main(argv: list[str] | None = None):
    """Runs the demonstration, exiting with 1 on failure."""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    rng = None if args.seed is None else random.Random(args.seed)
    try:
        matched = run_demo(args.plaintext, rng)
    except toyrsa.KeyGenerationError as err:
        print(f"Failed to generate key pair: {err}")
        sys.exit(1)
    if not matched:
        print("Round trip failed!")
        sys.exit(1)
    print("It works!")


if __name__ == "__main__":
    main()

"""Toy RSA in an Academic Sense.

Provides toy-sized RSA key generation together with a per-byte randomized-padding encryption scheme, all built on
hand-written integer arithmetic. Keys fit into 32 bits, so none of this is secure; it is meant to be read and poked at.

Typical usage example:

    priv, pub = generate_key_pair()
    c = encrypt("Hi there!", pub)
    r = decrypt(c, priv)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from toyrsa.arith import ext_gcd
from toyrsa.arith import mod_inverse
from toyrsa.arith import pow_mod
from toyrsa.keygen import KeyGenerationError
from toyrsa.keygen import validate_key_pair
from toyrsa.primes import generate_prime
from toyrsa.primes import PrimeNotFoundError
from toyrsa.rsa import decrypt
from toyrsa.rsa import encrypt
from toyrsa.rsa import generate_key_pair
from toyrsa.rsa import PrivateKey
from toyrsa.rsa import PublicKey

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "PrivateKey",
    "PublicKey",
    "generate_key_pair",
    "encrypt",
    "decrypt",
    "generate_prime",
    "pow_mod",
    "ext_gcd",
    "mod_inverse",
    "validate_key_pair",
    "PrimeNotFoundError",
    "KeyGenerationError",
]

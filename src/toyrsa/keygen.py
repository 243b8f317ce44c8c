"""Core Key Generation Utility, deriving toy RSA key pairs from sieve-generated primes.

Primes are drawn so that they fit into 16 bits and their product fits into 32 bits, while still leaving room for a
full byte pair (up to 0xFFFF) below the modulus. The public exponent is itself a random prime between a third of the
modulus and the totient, the private exponent its inverse.

Typical usage example:

    (n, d), (n, e) = generate_key_pair()
    validate_key_pair((n, d), (n, e))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import random

from toyrsa import arith
from toyrsa import primes

logger = logging.getLogger(__name__)

PRIME_MIN: int = 256
PRIME_MAX: int = 4096
MAX_BLOCK: int = 0xFFFF
# Upper bound on the totient, which is also the size of the sieve behind the public exponent draw.
SIEVE_CAP: int = 2**26
_MAX_ATTEMPTS: int = 64


class KeyGenerationError(RuntimeError):
    """Key pair generation failed."""


def _draw_prime(low: int, high: int, rng: random.Random | None, what: str) -> int:
    """Draws a prime in `[low, high]`, re-raising a missing prime as a key generation failure.

    Args:
        low: Lower bound, inclusive.
        high: Upper bound, inclusive.
        rng: Random source passed on to `primes.generate_prime`.
        what: Name of the drawn value, used in the error message.

    Returns:
        The drawn prime.

    Raises:
        KeyGenerationError: If the range holds no prime.
    """
    try:
        return primes.generate_prime(low, high, rng)
    except primes.PrimeNotFoundError as err:
        raise KeyGenerationError(f"Failed to generate {what}: {err}") from err


def generate_key_pair(
    rng: random.Random | None = None,
    prime_min: int = PRIME_MIN,
    prime_max: int = PRIME_MAX,
) -> tuple[tuple[int, int], tuple[int, int]]:
    """Generates a toy RSA key pair.

    Draws two distinct primes `p` and `q`, then a prime public exponent `e` in `(n / 3, phi)` and its inverse `d`.
    Attempts where `p == q`, where the modulus cannot hold a full byte pair, or where `e` happens to share a factor with
    the totient are thrown away and redrawn.

    Args:
        rng: Random source used for every prime pick. Defaults to `primes.DEFAULT_RNG`.
        prime_min: Lower bound for `p` and `q`, inclusive. Must be >= 2.
        prime_max: Upper bound for `p` and `q`, inclusive. `(prime_max - 1) ** 2` bounds the totient and with it the
            sieve drawn for `e`, so it must not exceed `SIEVE_CAP` (prime_max <= 8193).

    Returns:
        A tuple of (private, public) sub-tuples (modulus, exponent).

    Raises:
        ValueError: If the prime bounds are invalid.
        KeyGenerationError: If no prime could be found or every attempt was rejected.
    """
    if prime_min < 2:
        raise ValueError("prime_min must be >= 2.")
    if prime_min > prime_max:
        raise ValueError("prime_min must not exceed prime_max.")
    if (prime_max - 1)**2 > SIEVE_CAP:
        raise ValueError(f"prime_max too large: the totient could exceed the sieve cap of {SIEVE_CAP}.")
    for attempt in range(_MAX_ATTEMPTS):
        p = _draw_prime(prime_min, prime_max, rng, "prime p")
        q = _draw_prime(prime_min, prime_max, rng, "prime q")
        if p == q:
            logger.debug("Attempt %d: drew p == q == %d, redrawing", attempt, p)
            continue
        n = p * q
        if n <= MAX_BLOCK:
            logger.debug("Attempt %d: modulus %d cannot hold a byte pair, redrawing", attempt, n)
            continue
        phi = (p - 1) * (q - 1)
        e = _draw_prime(n // 3 + 1, phi, rng, "public exponent e")
        if math.gcd(e, phi) != 1:
            logger.debug("Attempt %d: e = %d shares a factor with phi = %d, redrawing", attempt, e, phi)
            continue
        _, d, _ = arith.ext_gcd(e, phi)
        logger.debug("Generated key pair with modulus %d after %d attempt(s)", n, attempt + 1)
        return (n, d), (n, e)
    raise KeyGenerationError(f"No usable key pair found within {_MAX_ATTEMPTS} attempts.")


def validate_key_pair(private: tuple[int, int], public: tuple[int, int], samples: int | None = None) -> bool:
    """Checks that a key pair decrypts what it encrypts.

    Args:
        private: The (modulus, exponent) private key.
        public: The (modulus, exponent) public key.
        samples: How many representatives to check, spread evenly over `[0, min(n - 1, MAX_BLOCK)]`.
            If not provided, every representative in that range is checked.

    Returns:
        True if both keys share a modulus and every checked representative survives a round trip.
    """
    (n, d), (pub_n, e) = private, public
    if n != pub_n or n <= 1:
        return False
    top = min(n - 1, MAX_BLOCK)
    step = 1 if samples is None else max(1, top // max(1, samples))
    return all(arith.pow_mod(arith.pow_mod(t, e, n), d, n) == t for t in range(0, top + 1, step))

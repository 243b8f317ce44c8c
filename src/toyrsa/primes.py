"""Sieve-backed random prime generation for toy-sized RSA keys.

Everything here works on plain Python integers and a cached Sieve of Eratosthenes. The sieve is exhaustive, so the
memory cost is linear in the upper bound of the requested range: fine for primes that fit into 16 bits and totients
that fit into 32 bits, unreasonable far beyond that.

Typical usage example:

    p = generate_prime(256, 4096)
    is_prime(p)
    get_sieve(10000, change=True)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math
import random
import secrets

logger = logging.getLogger(__name__)

DEFAULT_RNG: random.Random = secrets.SystemRandom()

_SIEVE: bytearray = bytearray()


class PrimeNotFoundError(RuntimeError):
    """The requested range holds no prime number."""


def _sieve(n: int) -> bytearray:
    """Implements the Sieve of Eratosthenes.

    Builds a composite-marker table for every integer in `[0, n]`. Zero and one are explicitly marked as non-prime,
    sieving stops at the root of `n`.

    Args:
        n: The largest integer to cover. Must be >= 0.

    Returns:
        A bytearray of length `n + 1` where index `i` is 0 if `i` is prime and 1 otherwise.
    """
    composite = bytearray(n + 1)
    composite[0:2] = b"\x01" * len(composite[0:2])
    for i in range(2, math.isqrt(n) + 1):
        if composite[i]:
            continue
        composite[i * i::i] = b"\x01" * len(range(i * i, n + 1, i))
    return composite


def get_sieve(n: int, change: bool = False) -> bytearray:
    """Get the composite-marker table, automatically generating if necessary.

    Uses the module-level `_SIEVE` as a cache. The table is read once into a local and its length is its cap, so a
    concurrent rebuild never hands back a table shorter than requested. Regeneration occurs if the requested bound is
    not covered or if forced by `change`.

    Args:
        n: The largest integer the table has to cover. Must be >= 0.
        change: Whether to force a recomputation. Defaults to False.

    Returns:
        A composite-marker table covering at least `[0, n]`, or exactly `[0, n]` if `change` is True.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    global _SIEVE
    sieve = _SIEVE
    if n >= len(sieve) or change:
        logger.debug("Sieving up to %d", n)
        sieve = _sieve(n)
        _SIEVE = sieve
    return sieve


def is_prime(n: int) -> bool:
    """Looks `n` up in the sieve, growing it if needed."""
    if n < 2:
        return False
    return not get_sieve(n)[n]


def generate_prime(low: int, high: int, rng: random.Random | None = None) -> int:
    """Picks a random prime in the closed range `[low, high]`.

    A uniformly random seed `x` is drawn from the range, then the search walks outward from it, checking `x + i`
    before `x - i` for growing `i`. The first prime met wins, so the result favours primes near the seed rather than
    the start of the range.

    Args:
        low: Lower bound of the range, inclusive. Must be >= 1.
        high: Upper bound of the range, inclusive.
        rng: Random source to draw the seed from. Defaults to `DEFAULT_RNG`.

    Returns:
        A prime `p` with `low <= p <= high`.

    Raises:
        ValueError: If `low` is smaller than 1.
        PrimeNotFoundError: If the range is empty or contains no prime.
    """
    if low < 1:
        raise ValueError("Lower bound must be >= 1.")
    if low > high:
        raise PrimeNotFoundError(f"Empty range [{low}, {high}].")
    if rng is None:
        rng = DEFAULT_RNG
    composite = get_sieve(high)
    x = rng.randint(low, high)
    i = 0
    while x + i <= high or x - i >= low:
        if x + i <= high and not composite[x + i]:
            logger.debug("Picked prime %d from seed %d in [%d, %d]", x + i, x, low, high)
            return x + i
        if x - i >= low and not composite[x - i]:
            logger.debug("Picked prime %d from seed %d in [%d, %d]", x - i, x, low, high)
            return x - i
        i += 1
    raise PrimeNotFoundError(f"No prime in range [{low}, {high}].")

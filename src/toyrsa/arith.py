"""Integer arithmetic underpinning the toy RSA scheme.

Modular exponentiation and the Extended Euclidean Algorithm, written out by hand rather than delegated to the
three-argument `pow`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` by square-and-multiply.

    Args:
        base: The base, any integer.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The residue in `[0, modulus - 1]`.

    Raises:
        ValueError: If `modulus` or `exponent` are out of range.
    """
    if modulus <= 0:
        raise ValueError("Modulus must be > 0.")
    if exponent < 0:
        raise ValueError("Exponent must be >= 0.")
    res = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            res = res * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return res


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Greatest common divisor of two integers (never negative).
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    if r0 < 0:
        return -r0, -s0, -t0
    return r0, s0, t0


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclid with the coefficients shifted into modular-inverse range.

    A negative coefficient of `a` is lifted by `b`, a negative coefficient of `b` by `a`. Bezout's identity then only
    holds modulo `a * b`, but for coprime inputs the first coefficient is the inverse of `a` modulo `b`.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        Tuple of (gcd, inverse-side coefficient of `a`, inverse-side coefficient of `b`).
    """
    g, inv_a, inv_b = eea(a, b)
    if inv_a < 0:
        inv_a += b
    if inv_b < 0:
        inv_b += a
    return g, inv_a, inv_b


def mod_inverse(a: int, m: int) -> int:
    """Inverse of `a` modulo `m`.

    Raises:
        ValueError: If `a` and `m` are not coprime.
    """
    g, inv, _ = ext_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}.")
    return inv % m

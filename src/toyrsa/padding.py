"""Byte mixers used to build the randomized per-byte padding.

Neither function needs to be secure or invertible for the padding to round-trip, both sides only ever recompute them
on identical inputs. The constants are fixed so ciphertexts stay comparable across versions.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0

MIX1_MULTIPLIER = 0x45
MIX2_MULTIPLIER = 0x3b


def _mix(x: int, multiplier: int) -> int:
    """Xor-shift/multiply avalanche on a single byte, wrapping at 256."""
    if not 0 <= x <= 0xFF:
        raise ValueError("Input must be a single byte in range [0, 255]")
    x ^= x >> 4
    x = (x * multiplier) & 0xFF
    x ^= x >> 4
    x = (x * multiplier) & 0xFF
    x ^= x >> 4
    return x


def mix1(x: int) -> int:
    """First padding mixer, multiplier 0x45."""
    return _mix(x, MIX1_MULTIPLIER)


def mix2(x: int) -> int:
    """Second padding mixer, multiplier 0x3b."""
    return _mix(x, MIX2_MULTIPLIER)

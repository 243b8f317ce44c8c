"""Provides the toy RSA keys and the randomized-padding codec built on them.

Every plaintext byte is padded with a fresh random byte, packed into a 16-bit message representative and run through
the RSA primitive on its own.

Typical usage example:

    priv, pub = generate_key_pair()
    c = pub.encrypt("Hi there!")
    r = priv.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import typing

from toyrsa import arith
from toyrsa import keygen
from toyrsa import padding
from toyrsa import primes


def c_rsa(key: tuple[int, int], message: int) -> int:
    """Performs core RSA operation. (Encrypt/Decrypt).

    Args:
        key: The (modulus, exponent) pair to apply.
        message: The int-marshalled message representative.

    Returns:
        The transformed representative.

    Raises:
        ValueError: If the message is out of range for the key.
    """
    mod, expo = key
    if not 0 <= message < mod:
        raise ValueError("Message representative must be in range [0, mod-1]")
    return arith.pow_mod(message, expo, mod)


class PublicKey(typing.NamedTuple):
    """Public half of a toy key pair.

    Attributes:
        mod: The modulus shared with the private key.
        expo: The public exponent e.
    """
    mod: int
    expo: int

    def encrypt(self,
                plaintext: str | bytes,
                rng: random.Random | None = None,
                encoding: str = "utf-8") -> list[int]:
        """Encrypts the plaintext one byte at a time.

        Each byte `p` gets its own random pad byte `r`. With `a = mix1(r) ^ p` and `b = mix2(a) ^ r`, the byte pair
        `(a, b)` is packed into a single representative and encrypted. Encrypting the same text twice therefore
        yields different ciphertexts.

        Args:
            plaintext: Text or raw bytes to encrypt.
            rng: Random source for the pad bytes. Defaults to `primes.DEFAULT_RNG`.
            encoding: Encoding applied to a `str` plaintext.

        Returns:
            One ciphertext integer per plaintext byte.

        Raises:
            ValueError: If the modulus is too small to hold a byte pair.
        """
        if isinstance(plaintext, str):
            plaintext = plaintext.encode(encoding)
        if rng is None:
            rng = primes.DEFAULT_RNG
        res = []
        for p in plaintext:
            r = rng.randrange(256)
            a = padding.mix1(r) ^ p
            b = padding.mix2(a) ^ r
            res.append(c_rsa(self, (a << 8) | b))
        return res


class PrivateKey(typing.NamedTuple):
    """Private half of a toy key pair.

    Attributes:
        mod: The modulus shared with the public key.
        expo: The private exponent d.
    """
    mod: int
    expo: int

    def decrypt_bytes(self, ciphertext: typing.Iterable[int]) -> bytes:
        """Decrypts a ciphertext back into raw bytes.

        Args:
            ciphertext: Ciphertext integers, in the order `encrypt` produced them.

        Returns:
            The recovered plaintext bytes.

        Raises:
            ValueError: If a ciphertext integer is out of range or does not decrypt to a byte pair.
        """
        res = bytearray()
        for c in ciphertext:
            t = c_rsa(self, c)
            if t > keygen.MAX_BLOCK:
                raise ValueError("Ciphertext does not decrypt to a byte pair. Wrong key?")
            a, b = t >> 8, t & 0xFF
            r = padding.mix2(a) ^ b
            res.append(padding.mix1(r) ^ a)
        return bytes(res)

    def decrypt(self, ciphertext: typing.Iterable[int], encoding: str = "utf-8") -> str:
        """Decrypts a ciphertext and decodes the result as text."""
        return self.decrypt_bytes(ciphertext).decode(encoding)


def generate_key_pair(rng: random.Random | None = None,
                      prime_min: int = keygen.PRIME_MIN,
                      prime_max: int = keygen.PRIME_MAX) -> tuple[PrivateKey, PublicKey]:
    """Generates a toy key pair. See `keygen.generate_key_pair` for the arguments.

    Returns:
        A (PrivateKey, PublicKey) tuple sharing one modulus.

    Raises:
        KeyGenerationError: If generation failed.
    """
    priv, pub = keygen.generate_key_pair(rng, prime_min, prime_max)
    return PrivateKey(*priv), PublicKey(*pub)


def encrypt(plaintext: str | bytes,
            public_key: tuple[int, int],
            rng: random.Random | None = None,
            encoding: str = "utf-8") -> list[int]:
    """Encrypts `plaintext` with a (modulus, exponent) public key. See `PublicKey.encrypt`."""
    return PublicKey(*public_key).encrypt(plaintext, rng, encoding)


def decrypt(ciphertext: typing.Iterable[int], private_key: tuple[int, int], encoding: str = "utf-8") -> str:
    """Decrypts `ciphertext` with a (modulus, exponent) private key. See `PrivateKey.decrypt`."""
    return PrivateKey(*private_key).decrypt(ciphertext, encoding)

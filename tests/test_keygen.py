# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import math

import pytest
import sympy

from toyrsa import keygen
from toyrsa import primes


def test_generate_key_pair_functional(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[191, 397, 60457])
    (n, d), (pub_n, e) = keygen.generate_key_pair()
    assert n == pub_n == 75827
    assert e == 60457
    assert d == 65473
    assert primes.generate_prime.call_args_list[2].args[:2] == (75827 // 3 + 1, 190 * 396)


def test_generate_key_pair_rejects_equal_primes(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[257, 257, 191, 397, 60457])
    (n, d), (_, e) = keygen.generate_key_pair()
    assert n == 75827
    assert (e, d) == (60457, 65473)
    assert primes.generate_prime.call_count == 5


def test_generate_key_pair_rejects_small_modulus(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[101, 103, 191, 397, 60457])
    (n, _), _ = keygen.generate_key_pair()
    assert n == 75827
    assert primes.generate_prime.call_count == 5


def test_generate_key_pair_rejects_shared_factor(mocker):
    # 19 divides (191 - 1) * (397 - 1)
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[191, 397, 19, 191, 397, 60457])
    _, (_, e) = keygen.generate_key_pair()
    assert e == 60457
    assert primes.generate_prime.call_count == 6


def test_generate_key_pair_wraps_prime_failure(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=primes.PrimeNotFoundError("No prime in range."))
    with pytest.raises(keygen.KeyGenerationError) as excinfo:
        keygen.generate_key_pair()
    assert isinstance(excinfo.value.__cause__, primes.PrimeNotFoundError)


def test_generate_key_pair_wraps_exponent_failure(mocker):
    mocker.patch("toyrsa.primes.generate_prime",
                 side_effect=[191, 397, primes.PrimeNotFoundError("No prime in range.")])
    with pytest.raises(keygen.KeyGenerationError, match="public exponent"):
        keygen.generate_key_pair()


def test_generate_key_pair_gives_up(mocker):
    mocker.patch("toyrsa.primes.generate_prime", return_value=257)
    with pytest.raises(keygen.KeyGenerationError):
        keygen.generate_key_pair()
    assert primes.generate_prime.call_count == 2 * keygen._MAX_ATTEMPTS  # pylint: disable=protected-access


def test_generate_key_pair_single_prime_range(rng):
    # Only 257 lives in [256, 262], so p == q every time.
    with pytest.raises(keygen.KeyGenerationError):
        keygen.generate_key_pair(rng, 256, 262)


@pytest.mark.parametrize("prime_min,prime_max", [(1, 100), (0, 100), (500, 400), (256, 0x10000)])
def test_generate_key_pair_validates(prime_min, prime_max):
    with pytest.raises(ValueError):
        keygen.generate_key_pair(None, prime_min, prime_max)


@pytest.mark.parametrize("prime_max", [8194, 60000, 0xFFFF])
def test_generate_key_pair_caps_exponent_sieve(mocker, prime_max):
    spy = mocker.spy(primes, "get_sieve")
    with pytest.raises(ValueError, match="sieve cap"):
        keygen.generate_key_pair(None, 256, prime_max)
    spy.assert_not_called()


def test_generate_key_pair_largest_accepted_bound(mocker):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[191, 397, 60457])
    (n, _), _ = keygen.generate_key_pair(None, 256, 8193)
    assert n == 75827


def test_generate_key_pair_logs_shared_factor(mocker, caplog):
    mocker.patch("toyrsa.primes.generate_prime", side_effect=[191, 397, 19, 191, 397, 60457])
    with caplog.at_level(logging.DEBUG, logger="toyrsa.keygen"):
        keygen.generate_key_pair()
    assert "e = 19 shares a factor with phi = 75240" in caplog.text


def test_generate_key_pair_conditions(rng):
    for _ in range(10):
        (n, d), (pub_n, e) = keygen.generate_key_pair(rng)
        assert n == pub_n
        assert n > keygen.MAX_BLOCK
        assert n < 2**32
        factors = sympy.factorint(n)
        assert list(factors.values()) == [1, 1]
        p, q = factors
        assert keygen.PRIME_MIN <= p <= keygen.PRIME_MAX
        assert keygen.PRIME_MIN <= q <= keygen.PRIME_MAX
        phi = (p - 1) * (q - 1)
        assert sympy.isprime(e)
        assert n // 3 < e < phi
        assert math.gcd(e, phi) == 1
        assert e * d % phi == 1
        assert keygen.validate_key_pair((n, d), (n, e), samples=2048)


def test_generate_key_pair_default_rng():
    priv, pub = keygen.generate_key_pair()
    assert keygen.validate_key_pair(priv, pub, samples=512)


@pytest.mark.slow
def test_generate_key_pair_full_domain(rng):
    priv, pub = keygen.generate_key_pair(rng)
    assert keygen.validate_key_pair(priv, pub)


def test_generate_key_pair_custom_range(rng):
    (n, d), (_, e) = keygen.generate_key_pair(rng, 300, 600)
    assert n > keygen.MAX_BLOCK
    assert all(300 <= f <= 600 for f in sympy.factorint(n))
    assert keygen.validate_key_pair((n, d), (n, e), samples=1024)


def test_validate_key_pair_known():
    assert keygen.validate_key_pair((75827, 65473), (75827, 60457))


@pytest.mark.parametrize("private,public", [
    ((65473, 75827), (75827, 60457)),  # moduli differ
    ((75827, 65471), (75827, 60457)),  # wrong private exponent
    ((1, 0), (1, 0)),
])
def test_validate_key_pair_rejects(private, public):
    assert not keygen.validate_key_pair(private, public)

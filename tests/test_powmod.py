"""Tests for square-and-multiply exponentiation."""

import random

import pytest

from ecc_field.common.field import FieldElement, PrimeField, powmod


def naive_powmod(base, exponent, modulo):
    result = 1 % modulo
    for _ in range(exponent):
        result = result * base % modulo
    return result


@pytest.mark.parametrize("modulo", [2, 13, 31, 97])
def test_matches_repeated_multiplication(modulo):
    for base in range(modulo):
        for exponent in range(3 * modulo):
            assert powmod(base, exponent, modulo) == naive_powmod(base, exponent, modulo)


def test_known_values():
    assert powmod(3, 3, 13) == 1
    assert powmod(24, 29, 31) == 22
    assert powmod(2, 10, 1 << 20) == 1024


def test_zero_exponent():
    assert powmod(0, 0, 13) == 1
    assert powmod(5, 0, 13) == 1
    assert powmod(5, 0, 1) == 0


def test_base_is_reduced():
    assert powmod(16, 3, 13) == powmod(3, 3, 13)
    assert powmod(-1, 3, 13) == 12


@pytest.mark.parametrize("prime", [PrimeField.SECP256K1_PRIME, PrimeField.P256_PRIME])
def test_curve_sized_moduli(prime):
    rng = random.Random(prime & 0xFFFF)
    for _ in range(20):
        base = rng.randrange(prime)
        exponent = rng.randrange(prime)
        assert powmod(base, exponent, prime) == pow(base, exponent, prime)


@pytest.mark.parametrize("prime", [PrimeField.SECP256K1_PRIME, PrimeField.P256_PRIME])
def test_curve_sized_inverse(prime):
    x = FieldElement(0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798 % prime, prime)
    assert (x * x.inverse()).is_one()
    assert x / x == FieldElement(1, prime)
    assert x.pow(-1) == x.inverse()


def test_negative_exponent_rejected():
    with pytest.raises(ValueError):
        powmod(3, -1, 13)


@pytest.mark.parametrize("modulo", [0, -13])
def test_bad_modulo_rejected(modulo):
    with pytest.raises(ValueError):
        powmod(3, 2, modulo)

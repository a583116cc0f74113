"""Tests for PrimeField and BatchInverter."""

import random

import pytest

from ecc_field.common.errors import DivisionByZeroError, FieldMismatchError, ModulusError
from ecc_field.common.field import BatchInverter, FieldElement, PrimeField


@pytest.fixture
def field():
    return PrimeField(PrimeField.SMALL_TEST_PRIME)


def test_element_reduces(field):
    assert field.element(200) == FieldElement(6, 97)
    assert field.element(-1) == FieldElement(96, 97)


def test_element_passes_through_same_field(field):
    a = FieldElement(5, 97)
    assert field.element(a) is a


def test_element_rejects_other_field(field):
    with pytest.raises(FieldMismatchError):
        field.element(FieldElement(5, 13))


def test_zero_and_one(field):
    assert field.zero() == FieldElement(0, 97)
    assert field.one() == FieldElement(1, 97)
    assert field.zero().is_zero()
    assert field.one().is_one()


@pytest.mark.parametrize("prime", [1, 0, -5])
def test_bad_modulus(prime):
    with pytest.raises(ModulusError):
        PrimeField(prime)


def test_contains(field):
    assert FieldElement(5, 97) in field
    assert FieldElement(5, 13) not in field
    assert 5 not in field


def test_equality_and_repr(field):
    assert field == PrimeField(97)
    assert field != PrimeField(13)
    assert len({field, PrimeField(97)}) == 1
    assert repr(field) == "PrimeField(97)"
    assert field != 97
    assert (field == "PrimeField(97)") is False


def test_random_in_range(field):
    rng = random.Random(7)
    for _ in range(200):
        assert field.random(rng=rng) in field
        assert not field.random(exclude_zero=True, rng=rng).is_zero()


def test_random_is_reproducible_with_seeded_rng(field):
    first = [field.random(rng=random.Random(3)) for _ in range(5)]
    second = [field.random(rng=random.Random(3)) for _ in range(5)]
    assert first == second


def test_raw_helpers(field):
    assert field.add(95, 5) == 3
    assert field.sub(3, 5) == 95
    assert field.mul(95, 45) == 7
    assert field.neg(5) == 92
    assert field.neg(0) == 0
    assert field.mul(field.inv(45), 45) == 1
    assert field.pow(12, 7) == FieldElement(12, 97).pow(7).num
    assert field.pow(12, -7) == FieldElement(12, 97).pow(-7).num


def test_raw_inverse_of_zero(field):
    with pytest.raises(DivisionByZeroError):
        field.inv(97)


def test_batch_inversion_matches_single(field):
    inverter = BatchInverter(field)
    elements = [field.element(i) for i in range(1, 97)]
    inverses = inverter.invert_batch(elements)
    assert inverses == [e.inverse() for e in elements]


def test_batch_inversion_products_are_one(field):
    inverter = BatchInverter(field)
    elements = [field.element(i) for i in range(1, 11)]
    inverses = inverter.invert_batch(elements)
    assert all((e * inv).is_one() for e, inv in zip(elements, inverses))


def test_batch_inversion_single_and_empty(field):
    inverter = BatchInverter(field)
    assert inverter.invert_batch([]) == []
    assert inverter.invert_batch([field.element(24)]) == [field.element(24).inverse()]


def test_batch_inversion_zero(field):
    inverter = BatchInverter(field)
    with pytest.raises(DivisionByZeroError, match="element 2"):
        inverter.invert_batch([field.element(1), field.element(2), field.zero()])


def test_batch_inversion_wrong_field(field):
    inverter = BatchInverter(field)
    with pytest.raises(FieldMismatchError):
        inverter.invert_batch([field.element(1), FieldElement(1, 13)])


def test_batch_inversion_rejects_non_elements(field):
    inverter = BatchInverter(field)
    with pytest.raises(TypeError, match="element 1"):
        inverter.invert_batch([field.element(1), 5])


def test_batch_inversion_raw(field):
    inverter = BatchInverter(field)
    values = [3, 24, 45, 96]
    inverses = inverter.invert_batch_raw(values)
    assert [v * i % 97 for v, i in zip(values, inverses)] == [1, 1, 1, 1]


def test_batch_inversion_large_prime():
    field = PrimeField(PrimeField.SECP256K1_PRIME)
    rng = random.Random(11)
    elements = [field.random(exclude_zero=True, rng=rng) for _ in range(16)]
    inverses = BatchInverter(field).invert_batch(elements)
    assert all((e * inv).is_one() for e, inv in zip(elements, inverses))

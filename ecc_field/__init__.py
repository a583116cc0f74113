"""
ecc-field
=========

Prime-field arithmetic for elliptic-curve cryptography: immutable field
elements with modular +, -, *, / and exponentiation (negative exponents
included), plus batch inversion and numpy-vectorized arithmetic for small
primes.

Modules:
    - common: FieldElement, PrimeField, BatchInverter, FieldVector, errors
    - demo: Worked examples, installed as ``ecc-field-demo``

Quick Start:
    >>> from ecc_field import FieldElement
    >>> FieldElement(3, 31) / FieldElement(24, 31)
    FieldElement_31(4)
"""

__version__ = "0.1.0"

from .common import (
    FieldElement,
    PrimeField,
    BatchInverter,
    FieldVector,
    powmod,
    FieldError,
    RangeError,
    FieldMismatchError,
    DivisionByZeroError,
    ModulusError,
)

__all__ = [
    "FieldElement",
    "PrimeField",
    "BatchInverter",
    "FieldVector",
    "powmod",
    "FieldError",
    "RangeError",
    "FieldMismatchError",
    "DivisionByZeroError",
    "ModulusError",
]

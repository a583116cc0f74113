"""
Field arithmetic for ecc-field.

This module provides:
    - Prime field elements and fields (FieldElement, PrimeField)
    - Square-and-multiply exponentiation (powmod)
    - Batch inversion (BatchInverter)
    - numpy-backed element-wise arithmetic (FieldVector)
    - The error hierarchy (FieldError and subclasses)
"""

from .errors import (
    FieldError,
    RangeError,
    FieldMismatchError,
    DivisionByZeroError,
    ModulusError,
)
from .field import FieldElement, PrimeField, BatchInverter, powmod
from .vector import FieldVector

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

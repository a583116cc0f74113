"""
Finite Field Arithmetic for Elliptic-Curve Cryptography.

This module implements modular arithmetic over prime fields Z_p, the layer
every elliptic-curve computation is built on. Curve coordinates, scalars and
signatures are all field elements; point addition and doubling are just
sequences of the operations below.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Subtraction: (a - b) mod p, normalized into [0, p-1]
    - Multiplication: (a * b) mod p
    - Division: a * b^(p-2) mod p (Fermat's little theorem)
    - Exponentiation: a^(n mod (p-1)) mod p, so negative n means inverse

Example:
    >>> a = FieldElement(7, 13)
    >>> b = FieldElement(12, 13)
    >>> a + b
    FieldElement_13(6)
    >>> a.pow(-3)
    FieldElement_13(8)

For ECC Context:
    - secp256k1 (Bitcoin) uses p = 2^256 - 2^32 - 977
    - NIST P-256 uses p = 2^256 - 2^224 + 2^192 + 2^96 - 1
    - Python ints are arbitrary precision, so the same code handles toy
      primes like 13 and 256-bit curve primes
    - Inversion needs a (p-2)-th power, so exponentiation must be
      square-and-multiply: ~256 squarings instead of ~2^256 multiplications
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union, List, Optional
import random

from .errors import (
    DivisionByZeroError,
    FieldMismatchError,
    ModulusError,
    RangeError,
)


def powmod(base: int, exponent: int, modulo: int) -> int:
    """
    Compute base^exponent mod modulo using square-and-multiply.

    Walks the exponent bit by bit from the least significant end: square the
    running base every step, multiply it into the result when the bit is set.
    Time complexity: O(log exponent) multiplications, which is what makes a
    (p-2)-th power feasible for 256-bit primes.

    Args:
        base: Any integer (reduced modulo ``modulo`` first)
        exponent: Non-negative exponent
        modulo: Positive modulus

    Returns:
        Integer in [0, modulo - 1]

    Raises:
        ValueError: If exponent is negative or modulo is not positive

    Example:
        >>> powmod(3, 3, 13)
        1
        >>> powmod(24, 29, 31)  # inverse of 24 mod 31
        22
    """
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if modulo < 1:
        raise ValueError(f"Modulo must be positive, got {modulo}")

    result = 1 % modulo
    base %= modulo

    while exponent > 0:
        if exponent & 1:  # If least significant bit is 1
            result = result * base % modulo
        base = base * base % modulo
        exponent >>= 1

    return result


def _check_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful residue
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


@dataclass(frozen=True)
class FieldElement:
    """
    An element of a prime field Z_p.

    Instances are immutable: every operation returns a new element. The
    constructor is strict; use PrimeField.element() to reduce arbitrary
    integers into the field.

    Attributes:
        num: The integer value (always in range [0, prime-1])
        prime: The field modulus (assumed prime, not verified)

    Raises:
        RangeError: If num is outside [0, prime-1]
        ModulusError: If prime is below 2
        TypeError: If num or prime is not an int

    Example:
        >>> a = FieldElement(95, 97)
        >>> b = FieldElement(45, 97)
        >>> a * b  # 95 * 45 = 4275 → 4275 mod 97 = 7
        FieldElement_97(7)
    """
    num: int
    prime: int

    def __post_init__(self):
        """Validate 0 <= num < prime."""
        _check_int("num", self.num)
        _check_int("prime", self.prime)
        if self.prime < 2:
            raise ModulusError(f"Prime must be at least 2, got {self.prime}")
        if not 0 <= self.num < self.prime:
            raise RangeError(self.num, self.prime)

    @classmethod
    def new(cls, num: int, prime: int) -> FieldElement:
        """Validating factory; same as calling the class directly."""
        return cls(num, prime)

    def __repr__(self) -> str:
        return f"FieldElement_{self.prime}({self.num})"

    def __str__(self) -> str:
        return str(self.num)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.num == other.num and self.prime == other.prime
        return False

    def __hash__(self) -> int:
        return hash((self.num, self.prime))

    def __int__(self) -> int:
        return self.num

    def __bool__(self) -> bool:
        return self.num != 0

    def _check_same_field(self, other: object, operation: str) -> None:
        if not isinstance(other, FieldElement):
            raise TypeError(
                f"Cannot {operation} FieldElement and {type(other).__name__}"
            )
        if self.prime != other.prime:
            raise FieldMismatchError(operation, self.prime, other.prime)

    # Arithmetic Operations

    def add(self, other: FieldElement) -> FieldElement:
        """Addition in the field: (a + b) mod p"""
        self._check_same_field(other, "add")
        return FieldElement((self.num + other.num) % self.prime, self.prime)

    def sub(self, other: FieldElement) -> FieldElement:
        """Subtraction in the field, normalized into [0, p-1]."""
        self._check_same_field(other, "subtract")
        # Python's % takes the sign of the divisor, so this is already >= 0
        return FieldElement((self.num - other.num) % self.prime, self.prime)

    def mul(self, other: FieldElement) -> FieldElement:
        """Multiplication in the field: (a * b) mod p"""
        self._check_same_field(other, "multiply")
        return FieldElement((self.num * other.num) % self.prime, self.prime)

    def div(self, other: FieldElement) -> FieldElement:
        """
        Division in the field: a * b^(p-2) mod p

        Raises:
            FieldMismatchError: If the operands are in different fields
            DivisionByZeroError: If other is the zero element
        """
        self._check_same_field(other, "divide")
        if other.num == 0:
            raise DivisionByZeroError(
                f"Cannot divide by zero in field of order {self.prime}"
            )
        inverse = powmod(other.num, self.prime - 2, self.prime)
        return FieldElement((self.num * inverse) % self.prime, self.prime)

    def pow(self, exponent: int) -> FieldElement:
        """
        Raise to an integer power, negative exponents included.

        By Fermat's little theorem a^(p-1) = 1 for nonzero a, so only the
        exponent modulo (p-1) matters. Reducing into [0, p-2] turns a
        negative exponent into the matching power of the inverse.

        Example:
            >>> FieldElement(7, 13).pow(-3)  # -3 mod 12 = 9, 7^9 mod 13 = 8
            FieldElement_13(8)
        """
        _check_int("exponent", exponent)
        n = exponent % (self.prime - 1)
        return FieldElement(powmod(self.num, n, self.prime), self.prime)

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: object, modulo: object = None) -> FieldElement:
        if modulo is not None or not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> FieldElement:
        """Negation: -a = p - a"""
        return FieldElement((self.prime - self.num) % self.prime, self.prime)

    def inverse(self) -> FieldElement:
        """
        Multiplicative inverse via Fermat's little theorem: a^(p-2) mod p.

        Raises:
            DivisionByZeroError: If self is zero (no inverse exists)
        """
        if self.num == 0:
            raise DivisionByZeroError("Cannot invert zero")
        return FieldElement(powmod(self.num, self.prime - 2, self.prime), self.prime)

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return self.num == 0

    def is_one(self) -> bool:
        """Check if this element is one."""
        return self.num == 1


class PrimeField:
    """
    A prime field Z_p.

    Provides factory methods for creating field elements and integer-level
    helpers for code that works on raw residues.

    Attributes:
        prime: The prime modulus p

    Common Primes:
        - 97: Good for testing (small, easy to verify by hand)
        - 2^31 - 1: Largest prime FieldVector accepts
        - secp256k1 and P-256 base fields: 256-bit curve primes

    Example:
        >>> field = PrimeField(97)
        >>> field.element(200)  # reduced: 200 mod 97 = 6
        FieldElement_97(6)
    """

    SMALL_TEST_PRIME = 97
    MERSENNE_31 = (1 << 31) - 1
    SECP256K1_PRIME = (1 << 256) - (1 << 32) - 977
    P256_PRIME = (1 << 256) - (1 << 224) + (1 << 192) + (1 << 96) - 1

    def __init__(self, prime: int):
        """
        Initialize a prime field.

        Args:
            prime: The prime modulus. Should be prime for correct behavior.
                   (Primality is not verified)
        """
        _check_int("prime", prime)
        if prime < 2:
            raise ModulusError(f"Prime must be at least 2, got {prime}")
        self.prime = prime

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrimeField):
            return self.prime == other.prime
        return False

    def __hash__(self) -> int:
        return hash(("PrimeField", self.prime))

    def __contains__(self, item: object) -> bool:
        return isinstance(item, FieldElement) and item.prime == self.prime

    def element(self, value: Union[int, FieldElement]) -> FieldElement:
        """Create a field element, reducing integers modulo p."""
        if isinstance(value, FieldElement):
            if value.prime != self.prime:
                raise FieldMismatchError("convert", value.prime, self.prime)
            return value
        _check_int("value", value)
        return FieldElement(value % self.prime, self.prime)

    def zero(self) -> FieldElement:
        """Return the additive identity (0)."""
        return FieldElement(0, self.prime)

    def one(self) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return FieldElement(1, self.prime)

    def random(self, exclude_zero: bool = False,
               rng: Optional[random.Random] = None) -> FieldElement:
        """
        Generate a random field element.

        The default generator is the ``random`` module, which is fine for
        tests but not for secrets; pass ``secrets.SystemRandom()`` as rng
        when the value must be unpredictable.

        Args:
            exclude_zero: If True, never returns zero (useful for testing inverses)
            rng: Optional random.Random-compatible generator

        Returns:
            A random FieldElement in [0, p-1] or [1, p-1]
        """
        source = rng if rng is not None else random
        low = 1 if exclude_zero else 0
        return FieldElement(source.randint(low, self.prime - 1), self.prime)

    # Direct arithmetic on raw residues

    def add(self, a: int, b: int) -> int:
        """Add two integers in the field."""
        return (a + b) % self.prime

    def sub(self, a: int, b: int) -> int:
        """Subtract two integers in the field."""
        return (a - b) % self.prime

    def mul(self, a: int, b: int) -> int:
        """Multiply two integers in the field."""
        return (a * b) % self.prime

    def neg(self, a: int) -> int:
        """Negate an integer in the field."""
        return (-a) % self.prime

    def inv(self, a: int) -> int:
        """Compute modular inverse of an integer."""
        return self.element(a).inverse().num

    def pow(self, base: int, exp: int) -> int:
        """Compute base^exp in the field; negative exp is reduced mod p-1."""
        return self.element(base).pow(exp).num


class BatchInverter:
    """
    Batch modular inversion using Montgomery's trick.

    Each inversion costs a full (p-2)-th power. Montgomery's trick computes
    n inverses with a single inversion plus 3(n-1) multiplications, which is
    how affine point batches are normalized in practice.

    Algorithm:
        1. Compute partial products: P[i] = a[0] * a[1] * ... * a[i]
        2. Invert final product: I = P[n-1]^(-1)
        3. Recover individual inverses by "peeling off" elements

    Example:
        >>> field = PrimeField(97)
        >>> inverter = BatchInverter(field)
        >>> elements = [field.element(i) for i in range(1, 11)]
        >>> inverses = inverter.invert_batch(elements)
        >>> all((e * inv).is_one() for e, inv in zip(elements, inverses))
        True
    """

    def __init__(self, field: PrimeField):
        """
        Initialize batch inverter.

        Args:
            field: The prime field to operate in
        """
        self.field = field

    def invert_batch(self, elements: List[FieldElement]) -> List[FieldElement]:
        """
        Compute inverses of all elements in a batch.

        Args:
            elements: List of field elements to invert

        Returns:
            List of inverses in the same order

        Raises:
            FieldMismatchError: If an element belongs to another field
            DivisionByZeroError: If any element is zero
        """
        if not elements:
            return []

        n = len(elements)

        for i, e in enumerate(elements):
            if not isinstance(e, FieldElement):
                raise TypeError(
                    f"Cannot invert {type(e).__name__} (element {i})"
                )
            if e.prime != self.field.prime:
                raise FieldMismatchError("invert", e.prime, self.field.prime)
            if e.is_zero():
                raise DivisionByZeroError(f"Cannot invert zero (element {i})")

        # products[i] = elements[0] * elements[1] * ... * elements[i]
        products = [elements[0]]
        for i in range(1, n):
            products.append(products[i - 1] * elements[i])

        inv = products[n - 1].inverse()

        inverses = [self.field.zero()] * n

        for i in range(n - 1, 0, -1):
            # inv = (a[0]*...*a[i])^(-1), so inv * products[i-1] = a[i]^(-1)
            inverses[i] = inv * products[i - 1]
            inv = inv * elements[i]

        inverses[0] = inv

        return inverses

    def invert_batch_raw(self, values: List[int]) -> List[int]:
        """
        Batch inversion on raw integers.

        Args:
            values: List of integers to invert (must be non-zero mod p)

        Returns:
            List of inverse integers
        """
        elements = [self.field.element(v) for v in values]
        return [inv.num for inv in self.invert_batch(elements)]

"""
Vectorized field arithmetic with numpy.

FieldVector holds many residues of one prime field in a read-only int64
array and applies the FieldElement operations element-wise. It is meant for
the 32-bit-range primes used in tests and teaching examples: restricting the
modulus to p < 2^31 keeps every product below 2^62, so no intermediate
overflows a signed 64-bit integer.

Example:
    >>> a = FieldVector([7, 9, 3], 13)
    >>> b = FieldVector([12, 4, 3], 13)
    >>> a + b
    FieldVector_13([6, 0, 6])
    >>> (a / b)[2]
    FieldElement_13(1)
"""

from __future__ import annotations
import numbers
from typing import Iterable, Iterator, List, Union

import numpy as np

from .errors import DivisionByZeroError, FieldMismatchError, ModulusError, RangeError
from .field import FieldElement

MAX_VECTOR_PRIME = 1 << 31


def _powmod_array(base: np.ndarray, exponent: int, prime: int) -> np.ndarray:
    """Square-and-multiply applied to every entry of ``base`` at once."""
    result = np.ones_like(base)
    base = base % prime

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % prime
        base = (base * base) % prime
        exponent >>= 1

    return result


def _freeze(nums: np.ndarray) -> np.ndarray:
    nums.flags.writeable = False
    return nums


def _check_nonzero(divisor: np.ndarray) -> None:
    zeros = divisor == 0
    if zeros.any():
        where = "" if divisor.ndim == 0 else f" (element {int(np.argmax(zeros))})"
        raise DivisionByZeroError(f"Cannot divide by zero{where}")


class FieldVector:
    """
    An immutable vector of elements of Z_p.

    Attributes:
        prime: The field modulus, 2 <= prime < 2^31
        nums: Read-only int64 array of residues in [0, prime-1]

    Raises:
        ModulusError: If prime is outside [2, 2^31)
        RangeError: If any value is outside [0, prime-1]
        TypeError: If values are not integers
        ValueError: If values are not one-dimensional
    """

    __slots__ = ("prime", "_nums")

    def __init__(self, values: Iterable[int], prime: int):
        if not isinstance(prime, int) or isinstance(prime, bool):
            raise TypeError(f"prime must be an int, got {type(prime).__name__}")
        if not 2 <= prime < MAX_VECTOR_PRIME:
            raise ModulusError(
                f"FieldVector prime must be in [2, 2^31), got {prime}"
            )

        if not isinstance(values, np.ndarray):
            values = list(values)
        arr = np.asarray(values)
        if arr.ndim != 1:
            raise ValueError(f"FieldVector values must be 1-D, got shape {arr.shape}")

        if arr.size == 0:
            arr = arr.astype(np.int64)
        elif arr.dtype == object:
            # Python ints too wide for int64 land here
            for v in arr:
                if not isinstance(v, numbers.Integral) or isinstance(v, bool):
                    raise TypeError(f"FieldVector values must be ints, got {type(v).__name__}")
                if not 0 <= int(v) < prime:
                    raise RangeError(int(v), prime)
        elif np.issubdtype(arr.dtype, np.integer):
            bad = (arr < 0) | (arr >= prime)
            if bad.any():
                raise RangeError(int(arr[int(np.argmax(bad))]), prime)
        else:
            raise TypeError(f"FieldVector values must be ints, got dtype {arr.dtype}")

        self.prime = prime
        self._nums = _freeze(np.array(arr, dtype=np.int64))

    @classmethod
    def _wrap(cls, nums: np.ndarray, prime: int) -> FieldVector:
        """Build from an already-reduced int64 array without re-validating."""
        vec = cls.__new__(cls)
        vec.prime = prime
        vec._nums = _freeze(nums)
        return vec

    @classmethod
    def from_elements(cls, elements: Iterable[FieldElement]) -> FieldVector:
        """Pack FieldElements that share one prime into a vector."""
        elements = list(elements)
        if not elements:
            raise ValueError("Cannot infer the prime of an empty element list")
        prime = elements[0].prime
        for e in elements[1:]:
            if e.prime != prime:
                raise FieldMismatchError("pack", prime, e.prime)
        return cls([e.num for e in elements], prime)

    @property
    def nums(self) -> np.ndarray:
        return self._nums

    def to_elements(self) -> List[FieldElement]:
        return [FieldElement(v, self.prime) for v in self._nums.tolist()]

    def __repr__(self) -> str:
        return f"FieldVector_{self.prime}({self._nums.tolist()})"

    def __len__(self) -> int:
        return len(self._nums)

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self.to_elements())

    def __getitem__(self, index: Union[int, slice]) -> Union[FieldElement, FieldVector]:
        if isinstance(index, slice):
            return FieldVector._wrap(self._nums[index].copy(), self.prime)
        return FieldElement(int(self._nums[index]), self.prime)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldVector):
            return self.prime == other.prime and np.array_equal(self._nums, other._nums)
        return False

    def __hash__(self) -> int:
        return hash((self.prime, self._nums.tobytes()))

    def _operand(self, other: Union[FieldVector, FieldElement], operation: str) -> np.ndarray:
        if not isinstance(other, (FieldVector, FieldElement)):
            raise TypeError(f"Cannot {operation} FieldVector and {type(other).__name__}")
        if other.prime != self.prime:
            raise FieldMismatchError(operation, self.prime, other.prime)
        if isinstance(other, FieldElement):
            return np.int64(other.num)
        if len(other) != len(self):
            raise ValueError(
                f"Cannot {operation} vectors of length {len(self)} and {len(other)}"
            )
        return other._nums

    # Element-wise arithmetic; a FieldElement operand broadcasts

    def add(self, other: Union[FieldVector, FieldElement]) -> FieldVector:
        rhs = self._operand(other, "add")
        return FieldVector._wrap((self._nums + rhs) % self.prime, self.prime)

    def sub(self, other: Union[FieldVector, FieldElement]) -> FieldVector:
        rhs = self._operand(other, "subtract")
        return FieldVector._wrap((self._nums - rhs) % self.prime, self.prime)

    def mul(self, other: Union[FieldVector, FieldElement]) -> FieldVector:
        rhs = self._operand(other, "multiply")
        return FieldVector._wrap((self._nums * rhs) % self.prime, self.prime)

    def div(self, other: Union[FieldVector, FieldElement]) -> FieldVector:
        """
        Element-wise a * b^(p-2) mod p.

        Raises:
            DivisionByZeroError: If any divisor entry is zero
        """
        rhs = np.asarray(self._operand(other, "divide"))
        _check_nonzero(rhs)
        inverse = _powmod_array(rhs, self.prime - 2, self.prime)
        return FieldVector._wrap((self._nums * inverse) % self.prime, self.prime)

    def pow(self, exponent: int) -> FieldVector:
        """Element-wise power; the exponent is reduced mod p-1 like FieldElement.pow."""
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")
        n = exponent % (self.prime - 1)
        return FieldVector._wrap(_powmod_array(self._nums, n, self.prime), self.prime)

    def __add__(self, other: object) -> FieldVector:
        if not isinstance(other, (FieldVector, FieldElement)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> FieldVector:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> FieldVector:
        if not isinstance(other, (FieldVector, FieldElement)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: object) -> FieldVector:
        if not isinstance(other, FieldElement):
            return NotImplemented
        lhs = self._operand(other, "subtract")
        return FieldVector._wrap((lhs - self._nums) % self.prime, self.prime)

    def __mul__(self, other: object) -> FieldVector:
        if not isinstance(other, (FieldVector, FieldElement)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: object) -> FieldVector:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> FieldVector:
        if not isinstance(other, (FieldVector, FieldElement)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: object) -> FieldVector:
        if not isinstance(other, FieldElement):
            return NotImplemented
        lhs = self._operand(other, "divide")
        _check_nonzero(self._nums)
        inverse = _powmod_array(self._nums, self.prime - 2, self.prime)
        return FieldVector._wrap((lhs * inverse) % self.prime, self.prime)

    def __pow__(self, exponent: object) -> FieldVector:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> FieldVector:
        return FieldVector._wrap((self.prime - self._nums) % self.prime, self.prime)

    def sum(self) -> FieldElement:
        """Sum of all entries as a FieldElement."""
        total = 0
        for v in self._nums.tolist():
            total = (total + v) % self.prime
        return FieldElement(total, self.prime)

    def prod(self) -> FieldElement:
        """Product of all entries as a FieldElement."""
        total = 1
        for v in self._nums.tolist():
            total = total * v % self.prime
        return FieldElement(total, self.prime)

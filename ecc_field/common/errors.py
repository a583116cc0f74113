"""
Exceptions raised by field arithmetic.

Every error derives from FieldError, which is itself a ValueError, so code
that already guards field operations with ``except ValueError`` keeps working.

Hierarchy:
    FieldError
    ├── RangeError           - num outside [0, prime - 1]
    ├── FieldMismatchError   - operands from different fields
    ├── DivisionByZeroError  - divisor is the zero element
    └── ModulusError         - modulus unusable for the requested type
"""


class FieldError(ValueError):
    """Base class for all field arithmetic errors."""


class RangeError(FieldError):
    """A value does not lie in [0, prime - 1]."""

    def __init__(self, num: int, prime: int):
        self.num = num
        self.prime = prime
        super().__init__(f"Num {num} not in field range 0 to {prime - 1}")


class FieldMismatchError(FieldError):
    """An operator was applied to elements of two different fields."""

    def __init__(self, operation: str, left_prime: int, right_prime: int):
        self.operation = operation
        self.left_prime = left_prime
        self.right_prime = right_prime
        super().__init__(
            f"Cannot {operation} two numbers in different Fields "
            f"(mod {left_prime} and mod {right_prime})"
        )


class DivisionByZeroError(FieldError, ZeroDivisionError):
    """Division by (or inversion of) the zero element."""


class ModulusError(FieldError):
    """The modulus is not usable (below 2, or too wide for a vector)."""

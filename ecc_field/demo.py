"""
ecc-field Demo

Walks through every field operation with small primes you can check by
hand, then repeats the expensive ones over the secp256k1 base field.

Run with:
    python -m ecc_field.demo            # all sections
    python -m ecc_field.demo errors     # one section
"""

import sys
import time
from typing import List, Optional

from ecc_field.common.errors import FieldError
from ecc_field.common.field import BatchInverter, FieldElement, PrimeField
from ecc_field.common.vector import FieldVector


def print_banner():
    """Print the demo banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 19 + "ECC-FIELD: PRIME FIELD DEMO" + " " * 22 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_header(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_arithmetic():
    """Addition, subtraction and multiplication."""
    print_header("DEMO 1: BASIC ARITHMETIC")

    a, b = FieldElement(7, 13), FieldElement(12, 13)
    print(f"\n{a!r} + {b!r} = {a + b!r}  (7 + 12 = 19 → 19 mod 13 = 6)")

    a, b = FieldElement(9, 57), FieldElement(29, 57)
    print(f"{a!r} - {b!r} = {a - b!r}  (9 - 29 = -20 → -20 + 57 = 37)")

    a, b = FieldElement(95, 97), FieldElement(45, 97)
    print(f"{a!r} * {b!r} = {a * b!r}  (95 * 45 = 4275 → 4275 mod 97 = 7)")

    print(f"-{a!r} = {-a!r}")


def demo_division_and_powers():
    """Division through Fermat inverses and negative exponents."""
    print_header("DEMO 2: DIVISION AND EXPONENTIATION")

    a, b = FieldElement(3, 31), FieldElement(24, 31)
    print(f"\n{a!r} / {b!r} = {a / b!r}")
    print(f"  24^(31-2) mod 31 = {b.inverse().num}, 3 * {b.inverse().num} mod 31 = 4")

    print(f"\n{'Expression':<34} {'Result':>18}")
    print("-" * 53)
    rows = [
        ("FieldElement_13(3).pow(3)", FieldElement(3, 13).pow(3)),
        ("FieldElement_13(7).pow(-3)", FieldElement(7, 13).pow(-3)),
        ("FieldElement_31(17).pow(-3)", FieldElement(17, 31).pow(-3)),
        ("12^7 * 77^49 (mod 97)",
         FieldElement(12, 97).pow(7) * FieldElement(77, 97).pow(49)),
    ]
    for label, value in rows:
        print(f"{label:<34} {value!r:>18}")


def demo_errors():
    """Every failure is an exception the caller can handle."""
    print_header("DEMO 3: ERROR HANDLING")

    attempts = [
        ("FieldElement(13, 13)", lambda: FieldElement(13, 13)),
        ("FieldElement(-1, 13)", lambda: FieldElement(-1, 13)),
        ("FieldElement(1, 13) + FieldElement(1, 17)",
         lambda: FieldElement(1, 13) + FieldElement(1, 17)),
        ("FieldElement(5, 13) / FieldElement(0, 13)",
         lambda: FieldElement(5, 13) / FieldElement(0, 13)),
    ]
    print()
    for label, attempt in attempts:
        try:
            attempt()
        except FieldError as exc:
            print(f"{label:<44} → {type(exc).__name__}: {exc}")


def demo_batch_inversion():
    """Montgomery's trick against one inversion per element."""
    print_header("DEMO 4: BATCH INVERSION")

    field = PrimeField(PrimeField.SMALL_TEST_PRIME)
    inverter = BatchInverter(field)
    elements = [field.element(i) for i in range(1, 11)]
    inverses = inverter.invert_batch(elements)

    print(f"\nElements: {[e.num for e in elements]}")
    print(f"Inverses: {[inv.num for inv in inverses]}")
    products = [(e * inv).num for e, inv in zip(elements, inverses)]
    print(f"Products (all should be 1): {products}")


def demo_vectors():
    """numpy-backed element-wise arithmetic."""
    print_header("DEMO 5: FIELD VECTORS")

    a = FieldVector([7, 9, 3, 12], 13)
    b = FieldVector([12, 4, 3, 5], 13)
    print(f"\na     = {a!r}")
    print(f"b     = {b!r}")
    print(f"a + b = {a + b!r}")
    print(f"a - b = {a - b!r}")
    print(f"a * b = {a * b!r}")
    print(f"a / b = {a / b!r}")
    print(f"a^-3  = {a.pow(-3)!r}")


def demo_large_prime():
    """The same operations over the secp256k1 base field."""
    print_header("DEMO 6: SECP256K1 BASE FIELD")

    field = PrimeField(PrimeField.SECP256K1_PRIME)
    x = field.element(0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798)

    start = time.perf_counter()
    inv = x.inverse()
    elapsed_ms = (time.perf_counter() - start) * 1000

    print("\np = 2^256 - 2^32 - 977")
    print(f"x        = {x.num:#x}")
    print(f"x^-1     = {inv.num:#x}")
    print(f"x * x^-1 = {(x * inv).num}")
    print(f"Inversion took {elapsed_ms:.3f} ms (square-and-multiply, 256-bit exponent)")


SECTIONS = {
    "arithmetic": demo_arithmetic,
    "powers": demo_division_and_powers,
    "errors": demo_errors,
    "batch": demo_batch_inversion,
    "vectors": demo_vectors,
    "large": demo_large_prime,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    names = sys.argv[1:] if argv is None else argv
    unknown = [n for n in names if n not in SECTIONS]
    if unknown:
        print(f"Unknown section(s): {', '.join(unknown)}")
        print(f"Available: {', '.join(SECTIONS)}")
        return 2

    print_banner()
    for name in names or SECTIONS:
        SECTIONS[name]()

    print("\n" + "=" * 70)
    print("DEMO COMPLETE")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Integer arithmetic modulo an explicit prime.

Results are always in [0, prime), whatever the sign of the operands.
"""

from __future__ import annotations


def reduce(a: int, prime: int) -> int:
    """Reduce an integer into [0, prime)."""
    # Python's % already takes the sign of the divisor.
    return a % prime


def add(a: int, b: int, prime: int) -> int:
    """Addition mod *prime*."""
    return reduce(a + b, prime)

"""Elements of a prime field F_p.

A ``FieldElement`` is an immutable ``(num, prime)`` pair with
``0 <= num < prime``.  Only construction, equality, display and
addition are provided.

``prime`` is taken on trust: it is never checked for primality.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, StrictInt, model_validator

from primefield.arith import modular

logger = logging.getLogger(__name__)


class FiniteFieldError(Exception):
    """Base class for recoverable finite-field errors."""


class NotInFiniteField(FiniteFieldError):
    """Raised when a residue lies outside [0, prime)."""

    def __init__(self, num: int, prime: int | None = None) -> None:
        self.num = num
        self.prime = prime
        super().__init__(f"The number {num} is not in the finite field")


class FieldMismatchError(TypeError):
    """Raised when combining elements of two different fields.

    This is a programming error, not a ``FiniteFieldError``.
    """

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot add elements of different fields: F_{left} and F_{right}"
        )


class FieldElement(BaseModel):
    """An element of the prime field F_prime."""

    model_config = ConfigDict(frozen=True)

    num: StrictInt
    prime: StrictInt

    @model_validator(mode="after")
    def check_in_field(self) -> "FieldElement":
        if self.num < 0 or self.num >= self.prime:
            logger.debug("rejected residue %d for prime %d", self.num, self.prime)
            raise NotInFiniteField(self.num, self.prime)
        return self

    @classmethod
    def new(cls, num: int, prime: int) -> "FieldElement":
        """Construct ``num`` in F_prime, raising ``NotInFiniteField`` if out of range."""
        return cls(num=num, prime=prime)

    def __str__(self) -> str:
        return f"FieldElement_{self.num}({self.prime})"

    def __add__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def add(self, other: "FieldElement") -> "FieldElement":
        """Field addition; both operands must share the same prime."""
        if self.prime != other.prime:
            logger.debug("cross-field addition F_%d + F_%d", self.prime, other.prime)
            raise FieldMismatchError(self.prime, other.prime)
        return FieldElement.new(modular.add(self.num, other.num, self.prime), self.prime)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

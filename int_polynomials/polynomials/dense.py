# (C) 2024 Irreducible Inc.

from __future__ import annotations

import logging
import operator
from typing import Callable, Self

from .errors import InvalidArgumentError, InvariantViolationError
from .polynomial import Polynomial, check_operand

logger = logging.getLogger(__name__)


def _check_integer(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")


def _check_exponent(exponent: int) -> None:
    _check_integer("exponent", exponent)
    if exponent < 0:
        raise InvalidArgumentError(f"exponent must be non-negative, got {exponent}")


class DensePolynomial(Polynomial):
    """A polynomial stored as a list of coefficients indexed by exponent.

    The list always ends in a non-zero coefficient, except for the zero polynomial, which is the single slot [0]. So
    len(coefficients) == degree + 1 holds for every instance handed out to callers.
    """

    def __init__(self, coefficient: int, exponent: int = 0) -> None:
        """Constructs the single term coefficient * x^exponent.

        A zero coefficient yields the zero polynomial whatever the exponent.

        :param coefficient: the coefficient of the term
        :param exponent: the non-negative exponent of the term
        """
        _check_integer("coefficient", coefficient)
        _check_exponent(exponent)
        self._coefficients = [0] * (exponent + 1)
        self._coefficients[exponent] = coefficient
        self._finish("__init__")

    @classmethod
    def zero(cls) -> Self:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Self:
        return cls(1, 0)

    @classmethod
    def _allocate(cls, degree_bound: int) -> Self:
        # fresh all-zero buffer; only valid until _finish narrows it
        result = cls.zero()
        result._coefficients = [0] * (degree_bound + 1)
        return result

    def _set_coefficient(self, exponent: int, value: int) -> None:
        """Writes one slot of a result that is still being built."""
        if not 0 <= exponent < len(self._coefficients):
            raise InvariantViolationError(f"exponent {exponent} outside of buffer of length {len(self._coefficients)}")
        if value == 0:
            raise InvariantViolationError(f"explicit zero term written at exponent {exponent}")
        self._coefficients[exponent] = value

    def _finish(self, operation: str) -> Self:
        while len(self._coefficients) > 1 and self._coefficients[-1] == 0:
            self._coefficients.pop()
        if not self.is_well_formed():
            logger.error("%s produced %r with storage length %d", operation, self._coefficients, len(self._coefficients))
            raise InvariantViolationError(f"inconsistent degree in {operation}()")
        return self

    def degree(self) -> int:
        for exponent in range(len(self._coefficients) - 1, 0, -1):
            if self._coefficients[exponent] != 0:
                return exponent
        return 0

    def min_exponent(self) -> int:
        for exponent, c in enumerate(self._coefficients):
            if c != 0:
                return exponent
        return 0

    def coefficient(self, d: int) -> int:
        _check_exponent(d)
        if d >= len(self._coefficients):
            return 0
        return self._coefficients[d]

    def is_zero(self) -> bool:
        return not any(self._coefficients)

    def is_well_formed(self) -> bool:
        return len(self._coefficients) == self.degree() + 1

    def _combine(self, other: Polynomial, op: Callable[[int, int], int], operation: str) -> DensePolynomial:
        other = check_operand(other)
        bound = max(self.degree(), other.degree())
        result = self._allocate(bound)
        for exponent in range(bound + 1):
            value = op(self.coefficient(exponent), other.coefficient(exponent))
            if value != 0:
                result._set_coefficient(exponent, value)
        result._finish(operation)
        logger.debug("%s: degrees %d, %d -> %d", operation, self.degree(), other.degree(), result.degree())
        return result

    def add(self, other: Polynomial) -> DensePolynomial:
        return self._combine(other, operator.add, "add")

    def subtract(self, other: Polynomial) -> DensePolynomial:
        return self._combine(other, operator.sub, "subtract")

    def multiply(self, other: Polynomial) -> DensePolynomial:
        other = check_operand(other)
        if self.is_zero() or other.is_zero():
            return self.zero()

        left = self._coefficients
        right = [other.coefficient(j) for j in range(other.degree() + 1)]
        # partial products land on the same exponent, and may cancel before all of them are summed
        sums = [0] * (len(left) + len(right) - 1)
        for i, a in enumerate(left):
            if a == 0:
                continue
            for j, b in enumerate(right):
                if b != 0:
                    sums[i + j] += a * b

        result = self._allocate(len(sums) - 1)
        for exponent, value in enumerate(sums):
            if value != 0:
                result._set_coefficient(exponent, value)
        result._finish("multiply")
        logger.debug("multiply: degrees %d, %d -> %d", self.degree(), other.degree(), result.degree())
        return result

    def negate(self) -> DensePolynomial:
        result = self._allocate(self.degree())
        for exponent, c in enumerate(self._coefficients):
            if c != 0:
                result._set_coefficient(exponent, -c)
        return result._finish("negate")

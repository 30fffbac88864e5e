# (C) 2024 Irreducible Inc.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from .errors import InvalidArgumentError


class Polynomial(ABC):
    """An integer-coefficient polynomial in one variable.

    Instances are values: no public operation mutates one, and every arithmetic operation returns a new instance.
    Representations subclass this and implement the abstract accessors and operators. The operators of one
    representation accept any other representation as the right-hand operand, reading it only through ``degree`` and
    ``coefficient``.
    """

    @abstractmethod
    def degree(self) -> int:
        """The largest exponent with a non-zero coefficient, or 0 for the zero polynomial."""
        pass

    @abstractmethod
    def min_exponent(self) -> int:
        """The smallest exponent with a non-zero coefficient, or 0 for the zero polynomial."""
        pass

    @abstractmethod
    def coefficient(self, d: int) -> int:
        """Returns the coefficient of x^d.

        Exponents beyond the degree are absent terms and yield 0.

        :param d: a non-negative exponent
        :raises InvalidArgumentError: if d is negative
        """
        pass

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    @abstractmethod
    def add(self, other: Polynomial) -> Polynomial:
        pass

    @abstractmethod
    def subtract(self, other: Polynomial) -> Polynomial:
        pass

    @abstractmethod
    def multiply(self, other: Polynomial) -> Polynomial:
        pass

    @abstractmethod
    def negate(self) -> Polynomial:
        pass

    @abstractmethod
    def is_well_formed(self) -> bool:
        """Whether the instance satisfies its representation's structural invariant."""
        pass

    def minus(self) -> Polynomial:
        return self.negate()

    def terms(self) -> Iterator[tuple[int, int]]:
        """Yields (exponent, coefficient) for every non-zero term, highest exponent first."""
        for exponent in range(self.degree(), -1, -1):
            c = self.coefficient(exponent)
            if c != 0:
                yield exponent, c

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Polynomial:
        return self.negate()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return list(self.terms()) == list(other.terms())

    def __hash__(self) -> int:
        return hash(tuple(self.terms()))

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        out = ""
        for exponent, c in self.terms():
            if out and c > 0:
                out += "+"
            if exponent == 0:
                out += str(c)
                continue
            # unit coefficients are implied on non-constant terms: x, -x^2
            if c == -1:
                out += "-"
            elif c != 1:
                out += str(c)
            out += "x" if exponent == 1 else f"x^{exponent}"
        return out

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


def check_operand(other: Polynomial | None) -> Polynomial:
    """Validates the right-hand operand of a binary operator."""
    if other is None:
        raise InvalidArgumentError("operand must not be None")
    if not isinstance(other, Polynomial):
        raise InvalidArgumentError(f"operand must be a Polynomial, got {type(other).__name__}")
    return other

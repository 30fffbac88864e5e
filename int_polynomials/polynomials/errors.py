# (C) 2024 Irreducible Inc.

"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for every error raised by the polynomial types."""

    pass


class InvalidArgumentError(PolynomialError, ValueError):
    """The caller passed something the operation cannot accept.

    Raised for an absent (``None``) or non-polynomial operand, a negative or non-integer exponent, and a non-integer
    coefficient.
    """

    pass


class InvariantViolationError(PolynomialError, AssertionError):
    """A polynomial failed its own structural self-check.

    This is never the caller's fault: it only arises from a defect in the arithmetic routines.
    """

    pass

"""
Exception hierarchy for SnakeMath.

All exceptions inherit from SnakeMathError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Invalid input raises; it is never turned into NaN for the caller
"""


class SnakeMathError(Exception):
    """Base exception for all SnakeMath errors."""
    pass


class ValidationError(SnakeMathError):
    """
    Input validation failed.

    Raised when parameters violate their documented constraints
    (sigma <= 0, p outside [0, 1], non-finite input, unknown family).
    """
    pass


class DimensionError(ValidationError):
    """
    Paired inputs have inconsistent lengths.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few observations for the requested computation.

    Attributes:
        required: Minimum number of observations needed
        actual: Number of observations supplied
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class NumericalError(SnakeMathError):
    """
    Numerical computation failed.

    Base class for errors arising from the geometry of the data rather
    than from malformed parameters.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input is degenerate for the requested computation.

    Raised for zero-variance series (correlation, regression slope)
    and similar cases where the quantity is mathematically undefined.

    Attributes:
        quantity: Name of the quantity that is degenerate (e.g. 'var(x)')
    """

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number

"""
Custom exceptions for BMI Checker.

All exceptions inherit from BmiCheckerError for easy catching.
"""


class BmiCheckerError(Exception):
    """Base exception for all BMI Checker errors."""

    pass


class ConfigurationError(BmiCheckerError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        super().__init__(message)


class InvalidArgumentError(BmiCheckerError, ValueError):
    """Raised when a value handed to an operation is not acceptable."""

    pass


class UnsupportedUnitError(InvalidArgumentError):
    """
    Raised when no usable unit of measure was chosen.

    The user gets one retry; this is raised after the second miss.
    """

    def __init__(self, message: str, unit: object = None):
        self.unit = unit
        super().__init__(message)


class MeasurementRangeError(InvalidArgumentError):
    """Raised when a normalized measurement falls outside (0, maximum]."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: float | None = None,
        maximum: int | None = None,
    ):
        self.field = field
        self.value = value
        self.maximum = maximum
        super().__init__(message)


class InputFormatError(BmiCheckerError):
    """Raised when numeric input is malformed or input runs out."""

    def __init__(self, message: str, token: str | None = None):
        self.token = token
        super().__init__(message)

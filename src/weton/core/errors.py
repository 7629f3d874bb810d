class WetonError(Exception):
    """Base error."""

class MalformedArgumentError(WetonError, ValueError):
    """Raised by strict parsing when a date component is not an integer."""

class InvalidDateError(WetonError, ValueError):
    """Raised by engines that only accept real Gregorian dates."""

class UnknownNameError(WetonError, ValueError):
    """Raised when a weekday or pasaran name is not in the fixed tables."""

"""Custom exceptions for flight parameter planning."""


class FlightPlanningError(Exception):
    """Base flight planning exception."""


class InvalidInputError(FlightPlanningError):
    """Raised when neither or both of gsd and height are supplied."""


class FlightParameterWarning(UserWarning):
    """Issued when a derived parameter had to be corrected."""

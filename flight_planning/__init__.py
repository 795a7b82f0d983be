"""Survey flight parameter planning package."""

from .constants import DIAG_35MM, MAX_PIXEL_ROLL, MIN_PHOTO_INTERVAL
from .diagnostics import AdvisoryCollector, AdvisorySink
from .exceptions import FlightParameterWarning, FlightPlanningError, InvalidInputError
from .parameters import compute_flight_parameters, flight_parameters
from .types import Advisory, AdvisoryKind, CameraConfig, FlightParameters, MissionRequest

__all__ = [
    "DIAG_35MM",
    "MAX_PIXEL_ROLL",
    "MIN_PHOTO_INTERVAL",
    "Advisory",
    "AdvisoryCollector",
    "AdvisoryKind",
    "AdvisorySink",
    "CameraConfig",
    "FlightParameterWarning",
    "FlightParameters",
    "FlightPlanningError",
    "InvalidInputError",
    "MissionRequest",
    "compute_flight_parameters",
    "flight_parameters",
]

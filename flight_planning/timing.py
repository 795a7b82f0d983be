"""Flight speed, shutter speed and photo interval computations."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from flight_planning.constants import (
    INTERVAL_RESOLUTION,
    INTERVAL_TOLERANCE,
    KMH_PER_MS,
    MAX_PIXEL_ROLL,
    MIN_PHOTO_INTERVAL,
)
from flight_planning.diagnostics import AdvisorySink, emit
from flight_planning.types import AdvisoryKind, CameraConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptureTiming:
    ground_height: float     # m along track covered by one image
    photo_interval: float    # s
    flight_speed_kmh: float


def kmh_to_ms(speed_kmh: float) -> float:
    return speed_kmh / KMH_PER_MS


def ms_to_kmh(speed_ms: float) -> float:
    return speed_ms * KMH_PER_MS


def pixel_speed(flight_speed_ms: float, gsd: float) -> float:
    """Ground pixels crossed per second."""
    return flight_speed_ms / (gsd * 0.01)


def minimum_shutter_speed(flight_speed_ms: float, gsd: float, max_pixel_roll: float = MAX_PIXEL_ROLL) -> str:
    # round() is half-to-even
    denominator = round(pixel_speed(flight_speed_ms, gsd) / max_pixel_roll)
    return f"1/{denominator}"


def is_interval_aligned(photo_interval: float) -> bool:
    remainder = photo_interval % INTERVAL_RESOLUTION
    return remainder <= INTERVAL_TOLERANCE or INTERVAL_RESOLUTION - remainder <= INTERVAL_TOLERANCE


def round_up_interval(photo_interval: float) -> float:
    steps = 1 / INTERVAL_RESOLUTION
    return math.ceil(photo_interval * steps) / steps


def plan_capture_interval(
    camera: CameraConfig,
    gsd: float,
    front_overlap: float,
    flight_speed_kmh: float,
    sink: AdvisorySink | None = None,
) -> CaptureTiming:
    """
    Derive the photo interval for the requested front overlap.

    The interval is kept at or above MIN_PHOTO_INTERVAL and on a 0.1 s grid
    by lowering the flight speed. At most one correction is applied.
    """
    ground_height = camera.image_height_px * gsd / 100
    ground_height_overlap = ground_height * front_overlap
    ground_allowed_offset = ground_height - ground_height_overlap

    flight_speed_ms = kmh_to_ms(flight_speed_kmh)
    photo_interval = ground_allowed_offset / flight_speed_ms

    if photo_interval < MIN_PHOTO_INTERVAL:
        photo_interval = MIN_PHOTO_INTERVAL
        flight_speed_ms = ground_allowed_offset / photo_interval
        flight_speed_kmh = ms_to_kmh(flight_speed_ms)
        emit(
            AdvisoryKind.MIN_INTERVAL_CLAMPED,
            "Speed had to be lowered because frequency of photos would be too high. "
            f"New speed: {flight_speed_kmh} km/h",
            sink,
        )
    elif not is_interval_aligned(photo_interval):
        photo_interval = round_up_interval(photo_interval)
        flight_speed_ms = ground_allowed_offset / photo_interval
        flight_speed_kmh = ms_to_kmh(flight_speed_ms)
        emit(
            AdvisoryKind.INTERVAL_ROUNDED,
            f"Speed lowered to {flight_speed_kmh} km/h to round up photo interval time to {photo_interval} seconds",
            sink,
        )
    else:
        logger.debug("Photo interval %.3fs needs no correction", photo_interval)

    return CaptureTiming(
        ground_height=ground_height,
        photo_interval=photo_interval,
        flight_speed_kmh=flight_speed_kmh,
    )

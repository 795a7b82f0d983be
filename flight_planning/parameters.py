"""Flight parameter pipeline entry points."""
from __future__ import annotations

import logging

from flight_planning.diagnostics import AdvisorySink
from flight_planning.geometry import flight_line_distance, resolve_geometry, validate_target
from flight_planning.timing import kmh_to_ms, minimum_shutter_speed, plan_capture_interval
from flight_planning.types import CameraConfig, FlightParameters, MissionRequest

logger = logging.getLogger(__name__)


def compute_flight_parameters(
    camera: CameraConfig,
    request: MissionRequest,
    sink: AdvisorySink | None = None,
) -> FlightParameters:
    """
    Derive capture parameters for one flight line.

    Raises InvalidInputError unless exactly one of request.gsd and
    request.height is set. Corrections to height or speed are reported
    through sink (log + FlightParameterWarning when no sink is given).
    """
    validate_target(request.gsd, request.height)

    geometry = resolve_geometry(camera, request, sink)
    line_distance = flight_line_distance(geometry.ground_width, request.side_overlap)

    # Shutter speed is advisory and uses the requested cruise speed.
    shutter = minimum_shutter_speed(kmh_to_ms(request.flight_speed_kmh), geometry.gsd)

    timing = plan_capture_interval(
        camera,
        geometry.gsd,
        request.front_overlap,
        request.flight_speed_kmh,
        sink,
    )

    params = FlightParameters(
        height=geometry.height,
        gsd=geometry.gsd,
        flight_line_distance=line_distance,
        minimum_shutter_speed=shutter,
        photo_interval=timing.photo_interval,
        ground_height=timing.ground_height,
        front_overlap=request.front_overlap,
        flight_speed_kmh=timing.flight_speed_kmh,
    )
    logger.debug(
        "Flight parameters: height=%.2fm gsd=%.3fcm/px line_distance=%.2fm interval=%.1fs speed=%.2fkm/h",
        params.height,
        params.gsd,
        params.flight_line_distance,
        params.photo_interval,
        params.flight_speed_kmh,
    )
    return params


def flight_parameters(
    height: float | None = None,
    gsd: float | None = None,
    focal_length35: float | None = None,
    image_width_px: int | None = None,
    image_height_px: int | None = None,
    side_overlap: float | None = None,
    front_overlap: float | None = None,
    flight_speed_kmh: float | None = None,
    max_gsd: float | None = None,
    sink: AdvisorySink | None = None,
) -> FlightParameters:
    """
    Keyword interface to compute_flight_parameters.

    Options left as None take the configured defaults (focal length 20mm,
    4000x3000 px, 0.8 side and front overlap, 54 km/h, no GSD cap).

    Example:
        params = flight_parameters(gsd=4, side_overlap=0.8, front_overlap=0.8,
                                   flight_speed_kmh=54, max_gsd=0)
    """
    validate_target(gsd, height)

    camera_fields = {
        "focal_length35": focal_length35,
        "image_width_px": image_width_px,
        "image_height_px": image_height_px,
    }
    request_fields = {
        "side_overlap": side_overlap,
        "front_overlap": front_overlap,
        "flight_speed_kmh": flight_speed_kmh,
        "max_gsd": max_gsd,
    }
    camera = CameraConfig(**{k: v for k, v in camera_fields.items() if v is not None})
    request = MissionRequest(
        gsd=gsd,
        height=height,
        **{k: v for k, v in request_fields.items() if v is not None},
    )
    return compute_flight_parameters(camera, request, sink)

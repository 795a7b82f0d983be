"""Ground geometry: resolving GSD and flight height from camera optics."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from flight_planning.constants import DIAG_35MM
from flight_planning.diagnostics import AdvisorySink, emit
from flight_planning.exceptions import InvalidInputError
from flight_planning.types import AdvisoryKind, CameraConfig, MissionRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroundGeometry:
    height: float        # m
    gsd: float           # cm/px
    ground_width: float  # m covered across track by one image


def validate_target(gsd: float | None, height: float | None) -> None:
    if (gsd is None) == (height is None):
        raise InvalidInputError("You must specify either gsd or height!")


def gsd_from_height(height: float, camera: CameraConfig) -> float:
    mult_factor = height / camera.focal_length35
    diag_ground = DIAG_35MM * mult_factor
    return diag_ground / camera.image_diag_px * 100


def height_from_gsd(gsd: float, camera: CameraConfig) -> float:
    diag_ground = camera.image_diag_px * gsd / 100
    mult_factor = diag_ground / DIAG_35MM
    return mult_factor * camera.focal_length35


def ground_width(gsd: float, camera: CameraConfig) -> float:
    return camera.image_width_px * gsd / 100


def cap_height(height: float, gsd: float, max_gsd: float) -> float:
    """Scale height down so the GSD at the new height equals max_gsd."""
    return height * max_gsd / gsd


def resolve_geometry(
    camera: CameraConfig,
    request: MissionRequest,
    sink: AdvisorySink | None = None,
) -> GroundGeometry:
    """
    Solve whichever of gsd/height the request leaves open.

    When height is given and max_gsd is set, a GSD above the cap lowers the
    height once and recomputes the GSD from it. There is no iteration: the
    recomputation is exact for the scaled height. The request is expected to
    have passed validate_target.
    """
    if request.gsd is None:
        height = request.height
        gsd = gsd_from_height(height, camera)
        if request.max_gsd > 0 and gsd > request.max_gsd:
            height = cap_height(height, gsd, request.max_gsd)
            emit(
                AdvisoryKind.GSD_CAPPED,
                f"GSD of {gsd} is above target of {request.max_gsd} so adjusting height down to {height}",
                sink,
            )
            gsd = gsd_from_height(height, camera)
            logger.info("Final GSD is %s", gsd)
    else:
        gsd = request.gsd
        height = height_from_gsd(gsd, camera)

    return GroundGeometry(height=height, gsd=gsd, ground_width=ground_width(gsd, camera))


def flight_line_distance(ground_width: float, side_overlap: float) -> float:
    """Spacing between parallel passes; overlaps outside [0, 1) are not rejected."""
    return ground_width * (1 - side_overlap)

"""Types for flight parameter planning."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from flight_planning import config


class CameraConfig(BaseModel):
    """Camera optics used to relate flight height to ground resolution."""

    model_config = ConfigDict(frozen=True)

    focal_length35: float = Field(default_factory=lambda: config.settings.focal_length35, gt=0)
    image_width_px: int = Field(default_factory=lambda: config.settings.image_width_px, gt=0)
    image_height_px: int = Field(default_factory=lambda: config.settings.image_height_px, gt=0)

    @property
    def image_diag_px(self) -> float:
        return math.sqrt(self.image_width_px**2 + self.image_height_px**2)


class MissionRequest(BaseModel):
    """
    Desired capture geometry for one flight line.
    Exactly one of gsd (cm/px) or height (m) must be set; this is checked
    by the pipeline so the failure surfaces as InvalidInputError.
    """

    model_config = ConfigDict(frozen=True)

    gsd: float | None = None      # target ground resolution (cm/px)
    height: float | None = None   # target flight height (m)
    side_overlap: float = Field(default_factory=lambda: config.settings.side_overlap)
    front_overlap: float = Field(default_factory=lambda: config.settings.front_overlap)
    flight_speed_kmh: float = Field(default_factory=lambda: config.settings.flight_speed_kmh)
    max_gsd: float = Field(default_factory=lambda: config.settings.max_gsd)  # 0 disables the cap


class FlightParameters(BaseModel):
    """Derived capture parameters for a survey flight line."""

    model_config = ConfigDict(frozen=True)

    height: float                 # flight height (m)
    gsd: float                    # ground resolution (cm/px)
    flight_line_distance: float   # spacing between adjacent flight lines (m)
    minimum_shutter_speed: str    # "1/N" seconds
    photo_interval: float         # seconds between captures
    ground_height: float          # footprint height of one image (m)
    front_overlap: float
    flight_speed_kmh: float       # possibly lowered from the requested speed

    def to_dict(self) -> dict:
        return self.model_dump()


class AdvisoryKind(Enum):
    GSD_CAPPED = "gsd_capped"
    MIN_INTERVAL_CLAMPED = "min_interval_clamped"
    INTERVAL_ROUNDED = "interval_rounded"


@dataclass(frozen=True)
class Advisory:
    """A non-fatal correction applied while deriving flight parameters."""

    kind: AdvisoryKind
    message: str

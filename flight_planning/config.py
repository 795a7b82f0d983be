"""
Default camera and mission settings.

Values are read from the environment (optionally via a .env file at the
project root) so a deployment can change its reference camera without code
changes. Physical constants live in constants.py and are not configurable.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=BASE_DIR / ".env")


def _truthy(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class PlannerSettings(BaseModel):
    focal_length35: float = Field(default_factory=lambda: float(os.getenv("FLIGHT_FOCAL_LENGTH35", "20")))
    image_width_px: int = Field(default_factory=lambda: int(os.getenv("FLIGHT_IMAGE_WIDTH_PX", "4000")))
    image_height_px: int = Field(default_factory=lambda: int(os.getenv("FLIGHT_IMAGE_HEIGHT_PX", "3000")))
    side_overlap: float = Field(default_factory=lambda: float(os.getenv("FLIGHT_SIDE_OVERLAP", "0.8")))
    front_overlap: float = Field(default_factory=lambda: float(os.getenv("FLIGHT_FRONT_OVERLAP", "0.8")))
    flight_speed_kmh: float = Field(default_factory=lambda: float(os.getenv("FLIGHT_SPEED_KMH", "54")))
    max_gsd: float = Field(default_factory=lambda: float(os.getenv("FLIGHT_MAX_GSD", "0")))
    # When false the default advisory sink only logs.
    advisory_warnings: bool = Field(
        default_factory=lambda: _truthy(os.getenv("FLIGHT_ADVISORY_WARNINGS"), default=True)
    )


settings = PlannerSettings()

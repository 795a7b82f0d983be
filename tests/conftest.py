"""Shared test fixtures for flight planning tests.

Resets the configured defaults so a developer's .env or FLIGHT_* variables
never leak into assertions.
"""
from __future__ import annotations

import pytest

from flight_planning import config
from flight_planning.diagnostics import AdvisoryCollector
from flight_planning.types import CameraConfig

_ENV_VARS = (
    "FLIGHT_FOCAL_LENGTH35",
    "FLIGHT_IMAGE_WIDTH_PX",
    "FLIGHT_IMAGE_HEIGHT_PX",
    "FLIGHT_SIDE_OVERLAP",
    "FLIGHT_FRONT_OVERLAP",
    "FLIGHT_SPEED_KMH",
    "FLIGHT_MAX_GSD",
    "FLIGHT_ADVISORY_WARNINGS",
)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings = config.PlannerSettings()
    monkeypatch.setattr("flight_planning.config.settings", settings)
    return settings


@pytest.fixture()
def camera() -> CameraConfig:
    return CameraConfig()


@pytest.fixture()
def collector() -> AdvisoryCollector:
    return AdvisoryCollector()

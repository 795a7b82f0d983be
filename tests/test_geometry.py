"""Geometry resolver, validator and spacing calculator."""
from __future__ import annotations

import math

import pytest

from flight_planning.constants import DIAG_35MM
from flight_planning.exceptions import FlightPlanningError, InvalidInputError
from flight_planning.geometry import (
    flight_line_distance,
    gsd_from_height,
    height_from_gsd,
    resolve_geometry,
    validate_target,
)
from flight_planning.types import AdvisoryKind, CameraConfig, MissionRequest


class TestValidateTarget:
    def test_gsd_only(self):
        validate_target(gsd=4, height=None)

    def test_height_only(self):
        validate_target(gsd=None, height=100)

    def test_neither(self):
        with pytest.raises(InvalidInputError):
            validate_target(gsd=None, height=None)

    def test_both(self):
        with pytest.raises(InvalidInputError):
            validate_target(gsd=4, height=100)

    def test_error_is_planning_error(self):
        assert issubclass(InvalidInputError, FlightPlanningError)


class TestConstants:
    def test_diag_35mm(self):
        assert DIAG_35MM == pytest.approx(43.2666153, rel=1e-7)

    def test_image_diag(self):
        assert CameraConfig().image_diag_px == 5000.0
        cam = CameraConfig(image_width_px=5472, image_height_px=3648)
        assert cam.image_diag_px == pytest.approx(math.hypot(5472, 3648))


class TestConversions:
    def test_gsd_from_height(self, camera):
        assert gsd_from_height(100, camera) == pytest.approx(4.3267, abs=1e-4)

    def test_height_from_gsd(self, camera):
        expected = 20 * 200 / DIAG_35MM
        assert height_from_gsd(4, camera) == pytest.approx(expected)
        assert height_from_gsd(4, camera) == pytest.approx(92.45, abs=0.01)

    @pytest.mark.parametrize("height", [30.0, 100.0, 250.0])
    def test_height_roundtrip(self, camera, height):
        assert height_from_gsd(gsd_from_height(height, camera), camera) == pytest.approx(height)

    @pytest.mark.parametrize("gsd", [0.8, 4.0, 12.5])
    def test_gsd_roundtrip(self, gsd):
        cam = CameraConfig(focal_length35=24, image_width_px=5472, image_height_px=3648)
        assert gsd_from_height(height_from_gsd(gsd, cam), cam) == pytest.approx(gsd)


class TestResolveGeometry:
    def test_from_gsd(self, camera, collector):
        geo = resolve_geometry(camera, MissionRequest(gsd=4), collector)
        assert geo.gsd == 4
        assert geo.height == pytest.approx(height_from_gsd(4, camera))
        assert geo.ground_width == pytest.approx(160.0)
        assert len(collector) == 0

    def test_from_height_without_cap(self, camera, collector):
        geo = resolve_geometry(camera, MissionRequest(height=100), collector)
        assert geo.height == 100
        assert geo.gsd == pytest.approx(4.3267, abs=1e-4)
        assert geo.ground_width == pytest.approx(4000 * geo.gsd / 100)
        assert len(collector) == 0

    def test_cap_above_gsd_is_ignored(self, camera, collector):
        geo = resolve_geometry(camera, MissionRequest(height=100, max_gsd=5), collector)
        assert geo.height == 100
        assert len(collector) == 0

    def test_cap_lowers_height(self, camera, collector):
        geo = resolve_geometry(camera, MissionRequest(height=100, max_gsd=4), collector)
        assert geo.height < 100
        assert geo.height == pytest.approx(height_from_gsd(4, camera))
        assert geo.gsd == pytest.approx(4, rel=1e-12)
        assert collector.kinds == [AdvisoryKind.GSD_CAPPED]
        assert "adjusting height down to" in collector.advisories[0].message

    def test_cap_logs_final_gsd(self, camera, collector, caplog):
        with caplog.at_level("INFO", logger="flight_planning.geometry"):
            resolve_geometry(camera, MissionRequest(height=100, max_gsd=4), collector)
        assert any("Final GSD is" in r.getMessage() for r in caplog.records)

    def test_cap_ignored_when_gsd_given(self, camera, collector):
        geo = resolve_geometry(camera, MissionRequest(gsd=6, max_gsd=4), collector)
        assert geo.gsd == 6
        assert len(collector) == 0


class TestFlightLineDistance:
    @pytest.mark.parametrize("overlap", [0.0, 0.6, 0.8, 0.95])
    def test_formula(self, overlap):
        assert flight_line_distance(160.0, overlap) == 160.0 * (1 - overlap)

    def test_nonphysical_overlap_not_rejected(self):
        assert flight_line_distance(100.0, 1.5) == pytest.approx(-50.0)

import math

import numpy as np
import pytest

from chromazone.geometry import LinearScale, SurfaceRect
from chromazone.gradients import (
    LinearGradient,
    StopListSurface,
    build_threshold_gradient,
    build_zone_gradient,
    normalize_position,
)
from chromazone.zones import ColorZone


class RecordingSurface:
    """Stand-in for a canvas context."""

    def __init__(self):
        self.calls = []

    def create_linear_gradient(self, x0, y0, x1, y1):
        self.calls.append((x0, y0, x1, y1))
        return LinearGradient(x0, y0, x1, y1)


class TestNormalizePosition:
    @pytest.mark.parametrize(
        "pixel, expected",
        [(0, 0.0), (25, 0.25), (100, 1.0), (-40, 0.0), (250, 1.0), (-math.inf, 0.0), (math.inf, 1.0)],
    )
    def test_clamped_offsets(self, rect, pixel, expected):
        assert normalize_position(pixel, rect) == pytest.approx(expected)

    def test_offset_rect(self):
        assert normalize_position(60, SurfaceRect(top=50, bottom=70)) == pytest.approx(0.5)

    @pytest.mark.parametrize("bottom", [10, 5])
    def test_non_positive_height(self, bottom):
        assert normalize_position(7, SurfaceRect(top=10, bottom=bottom)) == 0.0

    def test_nan_pixel(self, rect):
        assert normalize_position(float("nan"), rect) == 0.0


class TestBuildZoneGradient:
    def test_spans_rect_top_to_bottom(self):
        surface = RecordingSurface()
        rect = SurfaceRect(top=20, bottom=180)
        build_zone_gradient(surface, rect, lambda v: v, [])
        assert surface.calls == [(0, 20, 0, 180)]

    def test_two_stops_per_zone_sorted_by_descending_from(self, surface, rect, inverted):
        zones = [
            ColorZone(0, 30, "#000000"),
            ColorZone(60, 100, "#0000ff"),
            ColorZone(30, 60, "#00ff00"),
        ]
        gradient = build_zone_gradient(surface, rect, inverted, zones, fill_opacity=0.5)

        assert len(gradient) == 6
        np.testing.assert_allclose(gradient.positions, [0.4, 0.0, 0.7, 0.4, 1.0, 0.7])
        assert gradient.colors == [
            "rgba(0,0,255,0.5)", "rgba(0,0,255,0.5)",
            "rgba(0,255,0,0.5)", "rgba(0,255,0,0.5)",
            "rgba(0,0,0,0.5)", "rgba(0,0,0,0.5)",
        ]

    def test_caller_order_untouched(self, surface, rect, inverted):
        zones = [ColorZone(0, 50, "a"), ColorZone(50, 100, "b")]
        snapshot = list(zones)
        build_zone_gradient(surface, rect, inverted, zones)
        assert zones == snapshot

    def test_zone_opacity_overrides_fill_opacity(self, surface, rect, inverted):
        zones = [ColorZone(0, 50, "#ffffff", opacity=0.9), ColorZone(50, 100, "#000000")]
        gradient = build_zone_gradient(surface, rect, inverted, zones, fill_opacity=0.2)
        assert gradient.colors == [
            "rgba(0,0,0,0.2)", "rgba(0,0,0,0.2)",
            "rgba(255,255,255,0.9)", "rgba(255,255,255,0.9)",
        ]

    def test_degenerate_zones_add_no_stops(self, surface, rect, inverted):
        zones = [
            ColorZone(40, 40, "flat"),
            ColorZone(200, 150, "above"),
            ColorZone(0, 100, "#123456"),
        ]
        gradient = build_zone_gradient(surface, rect, inverted, zones)
        assert len(gradient) == 2
        assert gradient.colors == ["rgba(18,52,86,1)"] * 2

    def test_positions_stay_in_unit_interval(self, surface, rect, inverted):
        zones = [ColorZone(-1e6, 1e6, "a"), ColorZone(math.inf, -math.inf, "b")]
        gradient = build_zone_gradient(surface, rect, inverted, zones)
        assert np.all((gradient.positions >= 0) & (gradient.positions <= 1))

    def test_empty_or_missing_zones(self, surface, rect, inverted):
        assert build_zone_gradient(surface, rect, inverted, None).is_empty
        assert build_zone_gradient(surface, rect, inverted, []).is_empty

    def test_collapsed_rect_yields_empty_gradient(self, surface, inverted):
        rect = SurfaceRect(top=50, bottom=50)
        zones = [ColorZone(0, 100, "a"), ColorZone(-10, 0, "b")]
        assert build_zone_gradient(surface, rect, inverted, zones).is_empty

    def test_unparseable_colors_pass_through(self, surface, rect, inverted):
        gradient = build_zone_gradient(surface, rect, inverted, [ColorZone(0, 100, "teal")], 0.3)
        assert gradient.colors == ["teal", "teal"]


class TestBuildThresholdGradient:
    def test_clamped_outcome_at_surface_edge(self, surface, rect, inverted):
        # Both infinities land beyond the rect; the negative band starts at
        # the bottom edge and clamps to 1 at both ends.
        gradient = build_threshold_gradient(surface, rect, inverted, "A", "B", threshold=0, fill_opacity=1)
        assert list(gradient.positions) == [0.0, 1.0]
        assert gradient.colors == ["A", "A"]

    def test_threshold_inside_the_rect(self, surface, rect, inverted):
        gradient = build_threshold_gradient(surface, rect, inverted, "#00ff00", "#ff0000", threshold=25)
        np.testing.assert_allclose(gradient.positions, [0.0, 0.75, 0.75, 1.0])
        assert gradient.colors == [
            "rgba(0,255,0,1)", "rgba(0,255,0,1)",
            "rgba(255,0,0,1)", "rgba(255,0,0,1)",
        ]

    def test_with_linear_scale(self, surface, rect, centered_scale):
        gradient = build_threshold_gradient(surface, rect, centered_scale, "#0f0", "#f00", fill_opacity=0.6)
        np.testing.assert_allclose(gradient.positions, [0.0, 0.5, 0.5, 1.0])
        assert gradient.colors[0] == "rgba(0,255,0,0.6)"
        assert gradient.colors[-1] == "rgba(255,0,0,0.6)"

    def test_scale_is_queried_on_every_build(self, surface, inverted):
        calls = []

        def mapping(v):
            calls.append(v)
            return inverted(v)

        rect = SurfaceRect(top=0, bottom=100)
        build_threshold_gradient(surface, rect, mapping, "a", "b", threshold=10)
        build_threshold_gradient(surface, rect, mapping, "a", "b", threshold=10)
        assert len(calls) == 8


def test_stop_list_surface_creates_fresh_gradients():
    surface = StopListSurface()
    first = surface.create_linear_gradient(0, 0, 0, 10)
    first.add_color_stop(0, "a")
    second = surface.create_linear_gradient(0, 0, 0, 10)
    assert second.is_empty
    assert first.stops[0].position == 0.0
    assert first.end == (0, 10)


class TestZoneMappingsInGradient:
    def test_mapping_zones(self, surface, rect, inverted):
        zones = [{"from": 0, "to": 50, "color": "#ff0000"}, {"from": 50, "to": 100, "color": "#0000ff", "opacity": 0.3}]
        gradient = build_zone_gradient(surface, rect, inverted, zones, fill_opacity=0.8)
        np.testing.assert_allclose(gradient.positions, [0.5, 0.0, 1.0, 0.5])
        assert gradient.colors == [
            "rgba(0,0,255,0.3)", "rgba(0,0,255,0.3)",
            "rgba(255,0,0,0.8)", "rgba(255,0,0,0.8)",
        ]

    def test_malformed_zones_are_skipped(self, surface, rect, inverted):
        zones = [{"to": 50, "color": "a"}, "not a zone", {"from": 0, "to": 100, "color": "b"}]
        gradient = build_zone_gradient(surface, rect, inverted, zones)
        assert gradient.colors == ["b", "b"]

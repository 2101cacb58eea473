import math

import numpy as np
import pandas as pd
import pytest
from matplotlib.collections import LineCollection
from matplotlib.patches import Rectangle

from projplot.coords import CoordProj, PanelParams, coord_proj, limit_grid_range
from projplot.rendering import AxisGuide, Grill, Theme
from projplot.scales import ContinuousScale
from projplot.utils import expand_range


@pytest.fixture
def robinson():
    return coord_proj()


@pytest.fixture
def trained(robinson, trained_scales):
    return robinson.train(*trained_scales)


def test_train_uses_expanded_scale_ranges(trained):
    assert trained.x_range == pytest.approx((-12.5, 42.5))
    assert trained.y_range == pytest.approx((33.25, 71.75))


def test_train_default_orientation_centres_on_longitude_range(trained):
    assert trained.orientation == pytest.approx((90.0, 0.0, 15.0))


def test_train_projected_ranges_are_finite_and_increasing(trained):
    for rng in (trained.x_proj, trained.y_proj):
        assert all(np.isfinite(rng))
        assert rng[0] < rng[1]


def test_train_breaks_lie_inside_range(trained):
    for major, labels, rng in (
        (trained.x_major, trained.x_labels, trained.x_range),
        (trained.y_major, trained.y_labels, trained.y_range),
    ):
        assert len(major) >= 2
        assert len(labels) == len(major)
        assert np.all(np.diff(major) > 0)
        assert major.min() >= rng[0] and major.max() <= rng[1]


def test_train_minor_breaks_sit_between_majors(trained):
    assert len(trained.x_minor) == len(trained.x_major) - 1
    np.testing.assert_allclose(trained.x_minor, (trained.x_major[:-1] + trained.x_major[1:]) / 2)


def test_train_labels_use_degree_formatters(robinson, europe):
    x_scale = ContinuousScale("x", formatter=robinson.label_formatter("x"))
    y_scale = ContinuousScale("y", formatter=robinson.label_formatter("y"))
    x_scale.train(europe["long"])
    y_scale.train(europe["lat"])

    params = robinson.train(x_scale, y_scale)

    # Latitudes here are all north of the equator
    assert params.y_labels
    assert all(label.endswith("N") for label in params.y_labels)
    assert all("\N{DEGREE SIGN}" in label for label in params.x_labels)


def test_default_scales_keep_plain_labels(trained):
    assert all(label.replace(".", "").isdigit() for label in trained.y_labels)


def test_train_with_explicit_limits(trained_scales):
    coord = coord_proj(xlim=(-20, 50), ylim=(30, 75))
    params = coord.train(*trained_scales)
    assert params.x_range == (-20.0, 50.0)
    assert params.y_range == (30.0, 75.0)
    assert params.orientation[2] == pytest.approx(15.0)


def test_train_limits_may_be_reversed(trained_scales):
    params = coord_proj(xlim=(50, -20)).train(*trained_scales)
    assert params.x_range == (-20.0, 50.0)


def test_projected_extent_covers_grid_interior(robinson, trained):
    # Robinson is widest at the lowest latitude of the panel, not at its corners
    inner = robinson.project([42.5], [33.25])
    assert inner.x[0] <= trained.x_proj[1] + 1e-6


def test_transform_of_trained_corners_fall_in_unit_square(robinson, trained):
    data = pd.DataFrame({
        "x": [trained.x_range[0], trained.x_range[1], 15.0],
        "y": [trained.y_range[0], trained.y_range[0], trained.y_range[1]],
    })
    out = robinson.transform(data, trained)
    assert np.all(out["x"].between(-1e-9, 1 + 1e-9))
    assert np.all(out["y"].between(-1e-9, 1 + 1e-9))
    assert out["y"].iloc[0] == pytest.approx(0.0, abs=1e-9)
    assert out["y"].iloc[2] == pytest.approx(1.0, abs=1e-9)


def test_render_bg_returns_background_and_gridlines(robinson, trained):
    grill = robinson.render_bg(trained, Theme())

    assert isinstance(grill, Grill)
    assert isinstance(grill.background, Rectangle)
    assert isinstance(grill.xlines, LineCollection)
    assert isinstance(grill.ylines, LineCollection)

    xsegments = grill.xlines.get_segments()
    ysegments = grill.ylines.get_segments()
    assert len(xsegments) == len(trained.x_major)
    assert len(ysegments) == len(trained.y_major)
    assert xsegments[0].shape == (robinson.gridline_samples, 2)


def test_render_bg_gridlines_extend_past_panel(robinson, trained):
    grill = robinson.render_bg(trained, Theme())
    ys = np.concatenate([seg[:, 1] for seg in grill.xlines.get_segments()])
    assert ys.min() < 0.0
    assert ys.max() > 1.0


def test_render_bg_uses_theme_style(robinson, trained):
    theme = Theme(grid_color="#ff0000", grid_linewidth=2.0)
    grill = robinson.render_bg(trained, theme)
    np.testing.assert_allclose(grill.xlines.get_colors()[0], [1.0, 0.0, 0.0, 1.0])
    assert grill.xlines.get_linewidths()[0] == pytest.approx(2.0)
    assert grill.background.get_facecolor()[:3] == pytest.approx((235 / 255,) * 3)


def test_render_bg_with_unprojectable_panel_has_no_lines(robinson):
    params = PanelParams(
        x_range=(0.0, 10.0), y_range=(0.0, 10.0),
        x_proj=(math.nan, math.nan), y_proj=(math.nan, math.nan),
        x_major=np.array([0.0, 5.0]), y_major=np.array([0.0, 5.0]),
        x_labels=["0", "5"], y_labels=["0", "5"],
    )
    grill = robinson.render_bg(params, Theme())
    assert grill.xlines is None
    assert grill.ylines is None
    assert grill.artists() == [grill.background]


def test_gridline_ranges_stay_within_half_globe(robinson):
    params = PanelParams(x_range=(-180.0, 180.0), y_range=(80.0, 95.0), x_proj=(0, 1), y_proj=(0, 1))
    xrange, yrange = robinson.gridline_ranges(params)
    assert xrange == pytest.approx((-180.0, 180.0))
    # 20% expansion of [80, 95] is [77, 98]; both within 90 of the midpoint
    assert yrange == pytest.approx((77.0, 98.0))
    assert yrange[1] <= sum(yrange) / 2 + 90


def test_limit_grid_range_clips_wide_ranges():
    expanded = expand_range((-180, 180), mul=0.2)
    assert expanded == pytest.approx((-252.0, 252.0))
    assert limit_grid_range(expanded, 180) == pytest.approx((-180.0, 180.0))
    assert limit_grid_range((-100, 300), 90) == pytest.approx((10.0, 190.0))
    assert limit_grid_range((0, 10), 90) == (0.0, 10.0)


def test_axis_guides_carry_labels(robinson, trained):
    bottom = robinson.render_axis_h(trained, Theme())
    left = robinson.render_axis_v(trained, Theme())

    assert isinstance(bottom, AxisGuide) and bottom.side == "bottom"
    assert isinstance(left, AxisGuide) and left.side == "left"
    assert len(bottom) == len(trained.x_major)
    assert bottom.labels == trained.x_labels
    assert left.labels == trained.y_labels
    assert np.all(np.diff(bottom.positions) > 0)
    assert np.all((left.positions >= -1e-9) & (left.positions <= 1 + 1e-9))


def test_axis_guides_absent_without_major_breaks(robinson):
    params = PanelParams(x_range=(0.0, 1.0), y_range=(0.0, 1.0), x_proj=(0, 1), y_proj=(0, 1))
    assert robinson.render_axis_h(params, Theme()) is None
    assert robinson.render_axis_v(params, Theme()) is None


def test_axis_guide_drops_unprojectable_ticks(robinson):
    params = PanelParams(
        x_range=(0.0, 10.0), y_range=(0.0, 10.0),
        x_proj=(math.nan, math.nan), y_proj=(0.0, 1.0),
        x_major=np.array([0.0, 5.0]), x_labels=["0", "5"],
    )
    guide = robinson.render_axis_h(params, Theme())
    assert guide is not None
    assert len(guide) == 0
    assert guide.labels == []


def test_aspect_follows_projected_extent(robinson, trained):
    aspect = robinson.aspect(trained)
    expected = (trained.y_proj[1] - trained.y_proj[0]) / (trained.x_proj[1] - trained.x_proj[0])
    assert aspect == pytest.approx(expected)
    assert aspect > 0


def test_aspect_undefined_for_unprojectable_panel(robinson):
    params = PanelParams(x_range=(0, 1), y_range=(0, 1), x_proj=(math.nan, math.nan), y_proj=(0, 1))
    assert robinson.aspect(params) is None


def test_distance_is_relative_central_angle(robinson):
    params = PanelParams(x_range=(0.0, 180.0), y_range=(0.0, 0.0), x_proj=(0, 1), y_proj=(0, 1))
    dist = robinson.distance([0.0, 90.0, 90.0], [0.0, 0.0, 0.0], params)
    assert dist == pytest.approx([0.5, 0.0])


def test_coord_proj_is_not_linear(robinson):
    assert robinson.is_linear() is False
    assert isinstance(robinson, CoordProj)

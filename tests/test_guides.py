import numpy as np
import matplotlib.pyplot as plt

from projplot.rendering import AxisGuide, Grill, Theme, element_background, element_line, split_polylines


def test_split_polylines_breaks_at_nan():
    pieces = split_polylines([0, 1, np.nan, 2, 3, 4], [0, 1, 5, 2, 3, 4])
    assert [len(p) for p in pieces] == [2, 3]


def test_split_polylines_breaks_on_group_change():
    pieces = split_polylines([0, 1, 2, 3], [0, 1, 2, 3], group=[1, 1, 2, 2])
    assert [p.tolist() for p in pieces] == [[[0, 0], [1, 1]], [[2, 2], [3, 3]]]


def test_split_polylines_drops_single_points():
    assert split_polylines([0, np.nan, 1], [0, 0, 1]) == []


def test_element_line_none_without_segments():
    assert element_line([], Theme(), "panel.grid.major.x") is None


def test_grill_draws_its_artists():
    theme = Theme()
    lines = element_line([np.array([[0, 0], [1, 1]])], theme, "panel.grid.major.x")
    grill = Grill(background=element_background(theme), xlines=lines)
    fig, ax = plt.subplots()
    grill.draw(ax)
    assert grill.background in ax.patches
    assert lines in ax.collections
    assert len(grill.artists()) == 2


def test_axis_guide_filters_non_finite_positions():
    guide = AxisGuide(np.array([0.1, np.nan, 0.9]), ["a", "b", "c"], side="left")
    assert len(guide) == 2
    assert guide.labels == ["a", "c"]

    fig, ax = plt.subplots()
    guide.draw(ax, Theme())
    assert list(ax.get_yticks()) == [0.1, 0.9]
    assert [t.get_text() for t in ax.get_yticklabels()] == ["a", "c"]

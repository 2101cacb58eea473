import math

import numpy as np
import pytest

from projplot.exceptions import InvalidParameterError
from projplot.utils import (
    dist_central_angle,
    expand_range,
    finite_range,
    rescale,
    validate_limits,
    zero_range,
)


def test_rescale_maps_ends_and_midpoint():
    out = rescale([10.0, 15.0, 20.0], (0, 1), (10, 20))
    assert out.tolist() == pytest.approx([0.0, 0.5, 1.0])


def test_rescale_does_not_clamp():
    out = rescale([0.0, 30.0], (0, 1), (10, 20))
    assert out.tolist() == pytest.approx([-1.0, 2.0])


def test_rescale_zero_width_range_maps_to_middle():
    out = rescale([5.0, 7.0, np.nan], (0, 1), (5, 5))
    assert out[:2].tolist() == [0.5, 0.5]
    assert math.isnan(out[2])


def test_rescale_nan_range_maps_to_nan():
    out = rescale([1.0, 2.0], (0, 1), (np.nan, np.nan))
    assert np.isnan(out).all()


def test_rescale_defaults_to_own_range():
    assert rescale([2.0, 4.0, 6.0]).tolist() == pytest.approx([0.0, 0.5, 1.0])


def test_finite_range():
    assert finite_range([3.0, np.nan, -1.0, np.inf]) == (-1.0, 3.0)
    lo, hi = finite_range([np.nan])
    assert math.isnan(lo) and math.isnan(hi)


def test_zero_range():
    assert zero_range((1.0, 1.0))
    assert zero_range((1.0, 1.0 + 1e-15))
    assert not zero_range((0.0, 1.0))


def test_expand_range():
    assert expand_range((0, 10), mul=0.2) == pytest.approx((-2.0, 12.0))
    assert expand_range((0, 10), add=1) == pytest.approx((-1.0, 11.0))
    assert expand_range((3, 3), mul=0.2) == pytest.approx((2.5, 3.5))


def test_dist_central_angle():
    angles = dist_central_angle([0, 90, 90], [0, 0, 90])
    assert angles == pytest.approx([math.pi / 2, math.pi / 2])
    assert dist_central_angle([0], [0]).size == 0


def test_validate_limits():
    assert validate_limits("xlim", None) is None
    assert validate_limits("xlim", [1, 2]) == (1.0, 2.0)
    with pytest.raises(InvalidParameterError, match="exactly two"):
        validate_limits("xlim", [1])
    with pytest.raises(InvalidParameterError, match="finite"):
        validate_limits("ylim", [0, np.nan])
    with pytest.raises(InvalidParameterError):
        validate_limits("ylim", 5)

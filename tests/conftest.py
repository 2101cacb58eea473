import matplotlib

matplotlib.use("Agg")

import logging

import numpy as np
import pandas as pd
import pytest
import matplotlib.pyplot as plt

from projplot.scales import ContinuousScale


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def projplot_log(caplog):
    """Records from the package logger, which does not propagate to root."""
    logger = logging.getLogger("projplot")
    caplog.set_level(logging.DEBUG, logger="projplot")
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def europe():
    """A few lon/lat points with an extra attribute column."""
    return pd.DataFrame({
        "long": [-10.0, 2.35, 13.4, 40.0, 25.0],
        "lat": [35.0, 48.86, 52.52, 70.0, 60.17],
        "city": ["atlantic", "paris", "berlin", "arctic", "helsinki"],
        "group": [1, 1, 1, 2, 2],
    })


@pytest.fixture
def trained_scales(europe):
    x_scale = ContinuousScale("x")
    y_scale = ContinuousScale("y")
    x_scale.train(europe["long"])
    y_scale.train(europe["lat"])
    return x_scale, y_scale


@pytest.fixture
def counts():
    return pd.DataFrame({
        "year": [2015, 2016, 2017, 2018, 2019],
        "n": [3.0, 7.0, 2.0, 9.0, 5.0],
    })


@pytest.fixture
def nan_frame():
    return pd.DataFrame({"x": [np.nan, np.nan], "y": [np.nan, np.nan], "id": ["a", "b"]})

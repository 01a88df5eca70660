import logging

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.analysis import sanitize_coordinates, select_state
from fars.plotting import plot_state_accidents

from conftest import ACCIDENTS_2013


@pytest.fixture
def alabama_2013():
    return sanitize_coordinates(select_state(ACCIDENTS_2013, 1))


def test_plot_adds_one_geo_marker_trace(alabama_2013):
    fig = plot_state_accidents(alabama_2013, 1, 2013)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert isinstance(trace, go.Scattergeo)
    assert trace.mode == 'markers'
    assert len(trace.lat) == 3
    assert 'Alabama' in fig.layout.title.text
    assert '2013' in fig.layout.title.text


def test_plot_never_receives_sentinel_values(alabama_2013):
    fig = plot_state_accidents(alabama_2013, 1, 2013)

    lat = np.asarray(fig.data[0].lat, dtype=float)
    lon = np.asarray(fig.data[0].lon, dtype=float)
    assert np.isnan(lat).sum() == 1
    assert np.isnan(lon).sum() == 1
    assert np.nanmax(lat) <= 90
    assert np.nanmax(lon) <= 900


def test_plot_clips_geo_axes_to_data(alabama_2013):
    fig = plot_state_accidents(alabama_2013, 1, 2013)

    geo = fig.layout.geo
    assert geo.showsubunits is True
    lat_lo, lat_hi = geo.lataxis.range
    lon_lo, lon_hi = geo.lonaxis.range
    assert lat_lo < 32.5 and lat_hi > 33.1
    assert lon_lo < -87.2 and lon_hi > -86.7


def test_plot_draws_on_given_figure(alabama_2013):
    target = go.Figure()

    fig = plot_state_accidents(alabama_2013, 1, 2013, fig=target)

    assert fig is target
    assert len(target.data) == 1


def test_plot_without_valid_coordinates_warns(caplog):
    df = pd.DataFrame({'LATITUDE': [np.nan], 'LONGITUD': [np.nan]})
    caplog.set_level(logging.WARNING, logger='fars.plotting.state_map')

    fig = plot_state_accidents(df, 16, 2013)

    assert fig.layout.geo.lataxis.range is None
    assert any('No valid coordinates' in r.getMessage() for r in caplog.records)


def test_plot_requires_coordinate_columns():
    with pytest.raises(ValueError, match=r"missing required columns: \['LONGITUD'\]"):
        plot_state_accidents(pd.DataFrame({'LATITUDE': [30.0]}), 1, 2013)

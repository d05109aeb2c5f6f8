import numpy as np
import pytest

from regressionplayground.model.problem import DataPoint
from regressionplayground.model.state import ModelParameters, ModelState
from regressionplayground.view.series import (
    ViewModel, build_series, build_view_model, line_domain, update_series
)


def test_line_domain_samples() -> None:
    xs = line_domain()
    assert len(xs) == 26
    assert xs[0] == -6.0
    assert xs[-1] == 6.5
    assert np.allclose(np.diff(xs), 0.5)


def test_update_series_follows_parameters() -> None:
    line = update_series(ModelParameters(intercept=1.0, slope=2.0))
    assert np.allclose(line.ys, 1.0 + 2.0 * line.xs)


def test_build_series_passes_data_through() -> None:
    dataset = (DataPoint(0.5, -1.0), DataPoint(2.0, 3.0))
    series = build_series(dataset, ModelParameters())
    assert series.data.xs.tolist() == [0.5, 2.0]
    assert series.data.ys.tolist() == [-1.0, 3.0]
    assert np.allclose(series.model.ys, series.model.xs)


def test_build_series_empty_dataset() -> None:
    series = build_series((), ModelParameters())
    assert len(series.data.xs) == 0
    assert len(series.model.xs) == 26


def test_view_model_formatting() -> None:
    state = ModelState(dataset=(DataPoint(0.0, 2.0), DataPoint(1.0, 0.0)))
    state.set_intercept(2.0)
    state.set_slope(0.0)

    view_model = build_view_model(state)

    assert isinstance(view_model, ViewModel)
    assert view_model.mse == pytest.approx(2.0)
    assert view_model.intercept_text == "2.00"
    assert view_model.slope_text == "0.00"
    assert view_model.mse_text == "2.000"

"""
Presentation Adapter
====================
Translates the model state into plain chart data.

Why is this file needed?
------------------------
The chart widget should only draw. Everything it draws is computed here from
(Dataset, ModelParameters), without Qt, so it can be tested in isolation.

Two entry points mirror the two ways the chart is refreshed:
    build_series: everything (after a new problem).
    update_series: only the model line (after a slider move).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from regressionplayground.config import (
    LINE_X_START, LINE_X_STOP, LINE_X_STEP, PARAM_DECIMALS, MSE_DECIMALS
)
from regressionplayground.model.metrics import predict
from regressionplayground.model.problem import Dataset, dataset_arrays

if TYPE_CHECKING:
    import numpy.typing as npt
    from regressionplayground.model.state import ModelParameters, ModelState


@dataclass(frozen=True)
class LineSeries:
    xs: npt.NDArray[np.float64]
    ys: npt.NDArray[np.float64]


@dataclass(frozen=True)
class ChartSeries:
    data: LineSeries
    model: LineSeries


@dataclass(frozen=True)
class ViewModel:
    """Everything the window needs to show, already computed."""
    intercept: float
    slope: float
    mse: float
    series: ChartSeries

    @property
    def intercept_text(self) -> str:
        return f"{self.intercept:.{PARAM_DECIMALS}f}"

    @property
    def slope_text(self) -> str:
        return f"{self.slope:.{PARAM_DECIMALS}f}"

    @property
    def mse_text(self) -> str:
        return f"{self.mse:.{MSE_DECIMALS}f}"


def line_domain() -> npt.NDArray[np.float64]:
    """Sample positions of the model line, both ends inclusive."""
    count = int(round((LINE_X_STOP - LINE_X_START) / LINE_X_STEP)) + 1
    return LINE_X_START + LINE_X_STEP * np.arange(count, dtype=np.float64)


def update_series(params: ModelParameters) -> LineSeries:
    """Polyline approximating y = intercept + slope * x."""
    xs = line_domain()
    return LineSeries(xs=xs, ys=predict(params, xs))


def build_series(dataset: Dataset, params: ModelParameters) -> ChartSeries:
    xs, ys = dataset_arrays(dataset)
    return ChartSeries(data=LineSeries(xs=xs, ys=ys), model=update_series(params))


def build_view_model(state: ModelState) -> ViewModel:
    return ViewModel(
        intercept=state.params.intercept,
        slope=state.params.slope,
        mse=state.mse,
        series=build_series(state.dataset, state.params),
    )

"""Error metrics for a hand-set line fit."""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from regressionplayground.model.problem import Dataset, dataset_arrays

if TYPE_CHECKING:
    import numpy.typing as npt
    from regressionplayground.model.state import ModelParameters


def predict(params: ModelParameters, xs: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Evaluate y = intercept + slope * x."""
    return params.intercept + params.slope * np.asarray(xs, dtype=np.float64)


def mse(dataset: Dataset, params: ModelParameters) -> float:
    """
    Mean squared error of the line ``params`` over ``dataset``.

    An empty dataset has an error of 0.0.
    """
    if len(dataset) == 0:
        return 0.0

    xs, ys = dataset_arrays(dataset)
    residuals = ys - predict(params, xs)
    return float(np.mean(residuals ** 2))

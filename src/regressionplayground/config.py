"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (bounds, ranges, colours) from being
   scattered throughout the model and the view.
2. Consistency: The generator, the chart and the sliders all read the same
   ranges, so the data always fits the visible area.

Exports:
    NUM_POINTS (int): Size of a freshly generated dataset.
    DEFAULT_INTERCEPT, DEFAULT_SLOPE (float): Parameters after "New Problem".
    EXPORT_FILENAME (str): Suggested name of the exported CSV file.
"""
from typing import Tuple

# Application identity (used by QCoreApplication)
ORG_ID = "regression-playground"
APP_ID = "regression-playground"
VISIBLE_APP_NAME = "Linear Regression Playground"

# --- Problem generator ---
NUM_POINTS: int = 30
X_BOUNDS: Tuple[float, float] = (-5.5, 5.7)
LATENT_SLOPE_BOUNDS: Tuple[float, float] = (-1.0, 1.0)
LATENT_INTERCEPT_BOUNDS: Tuple[float, float] = (-1.0, 1.0)
NOISE_BOUNDS: Tuple[float, float] = (-1.0, 1.0)

# --- Model parameters ---
DEFAULT_INTERCEPT: float = 0.0
DEFAULT_SLOPE: float = 1.0

# Slider limits (w0 = intercept, w1 = slope)
INTERCEPT_RANGE: Tuple[float, float] = (-5.0, 5.0)
SLOPE_RANGE: Tuple[float, float] = (-3.0, 3.0)
SLIDER_STEP: float = 0.01
PARAM_DECIMALS: int = 2
MSE_DECIMALS: int = 3

# --- Model line sampling ---
LINE_X_START: float = -6.0
LINE_X_STOP: float = 6.5
LINE_X_STEP: float = 0.5

# --- Chart ---
CHART_X_RANGE: Tuple[float, float] = (-6.0, 6.5)
# Symmetric on purpose: generated y spans roughly [-7.7, 7.7], and the
# reference chart's (-7, -0.5) would clip every point above y = -0.5
CHART_Y_RANGE: Tuple[float, float] = (-7.0, 7.0)
CHART_X_TICK: float = 2.0
CHART_Y_TICK: float = 1.0
DATA_COLOR = "#2563eb"
MODEL_COLOR = "#ef4444"
DATA_POINT_SIZE: int = 10  # diameter in px
MODEL_LINE_WIDTH: int = 2

# --- Export ---
EXPORT_FILENAME = "linear-regression-data.csv"
CSV_FILTER = "CSV Files (*.csv)"

"""
Playground State (Data Model)
=============================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current dataset and the user's line
   parameters in one place.
2. Decoupling: The view never touches the data directly; the controller
   writes to this object and builds view models from it.

Classes:
    ModelParameters: The user-adjustable line (intercept w0, slope w1).
    ModelState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

import numpy as np

from regressionplayground.config import DEFAULT_INTERCEPT, DEFAULT_SLOPE, NUM_POINTS
from regressionplayground.model.metrics import mse
from regressionplayground.model.problem import Dataset, generate_problem

logger = logging.getLogger(__name__)


@dataclass
class ModelParameters:
    intercept: float = DEFAULT_INTERCEPT  # w0
    slope: float = DEFAULT_SLOPE          # w1

    def reset(self) -> None:
        self.intercept = DEFAULT_INTERCEPT
        self.slope = DEFAULT_SLOPE


@dataclass
class ModelState:
    """
    Holds the dataset and the line parameters of the current session.
    Pass this instance to the controller; the view only ever sees view models.
    """
    n_points: int = NUM_POINTS
    seed: Optional[int] = None

    dataset: Dataset = field(default_factory=tuple)
    params: ModelParameters = field(default_factory=ModelParameters)
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    @property
    def mse(self) -> float:
        """Always computed from the current dataset and parameters."""
        return mse(self.dataset, self.params)

    def new_problem(self) -> None:
        """Replace the dataset and reset the parameters to their defaults."""
        self.dataset = generate_problem(self.n_points, self.rng)
        self.params.reset()
        logger.info(f"New problem generated ({len(self.dataset)} points), parameters reset.")

    def set_intercept(self, value: float) -> None:
        self.params.intercept = float(value)
        logger.debug(f"Intercept set to {self.params.intercept:.2f}")

    def set_slope(self, value: float) -> None:
        self.params.slope = float(value)
        logger.debug(f"Slope set to {self.params.slope:.2f}")

    def set_parameter(self, name: str, value: float) -> None:
        """Set a parameter by name ('intercept' or 'slope')."""
        setters = {
            "intercept": self.set_intercept,
            "slope": self.set_slope,
        }
        if name not in setters:
            raise KeyError(f"Unknown model parameter '{name}'.")
        setters[name](value)

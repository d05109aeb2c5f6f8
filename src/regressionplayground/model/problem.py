"""
Problem Generator
=================
Builds the synthetic, noisy dataset the user tries to fit by hand.

Every point gets its own latent line: the "true" slope and intercept are
drawn again for each point rather than once for the whole dataset. The
scatter therefore fans out around the origin instead of hugging one line.

Classes:
    DataPoint: A single immutable (x, y) observation.

Functions:
    generate_problem: Draw a fresh dataset.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from regressionplayground.config import (
    NUM_POINTS, X_BOUNDS, LATENT_SLOPE_BOUNDS, LATENT_INTERCEPT_BOUNDS, NOISE_BOUNDS
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float


# Ordered and immutable; replaced as a whole, never edited in place
Dataset = Tuple[DataPoint, ...]


def dataset_arrays(dataset: Dataset) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Split a dataset into x and y arrays."""
    xs = np.fromiter((p.x for p in dataset), dtype=np.float64, count=len(dataset))
    ys = np.fromiter((p.y for p in dataset), dtype=np.float64, count=len(dataset))
    return xs, ys


def generate_problem(n: int = NUM_POINTS, rng: Optional[np.random.Generator] = None) -> Dataset:
    """
    Generate ``n`` noisy points.

    For each point independently:
        x         ~ U(-5.5, 5.7)
        slope     ~ U(-1, 1)
        intercept ~ U(-1, 1)
        noise     ~ U(-1, 1)
        y = intercept + slope * x + noise

    Args:
        n: Number of points. Zero gives an empty dataset.
        rng: Source of randomness. A fresh, unseeded generator is used if omitted.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"Number of points must be non-negative, got {n}.")

    if rng is None:
        rng = np.random.default_rng()

    xs = rng.uniform(*X_BOUNDS, size=n)
    latent_slopes = rng.uniform(*LATENT_SLOPE_BOUNDS, size=n)
    latent_intercepts = rng.uniform(*LATENT_INTERCEPT_BOUNDS, size=n)
    noise = rng.uniform(*NOISE_BOUNDS, size=n)

    ys = latent_intercepts + latent_slopes * xs + noise

    dataset = tuple(DataPoint(float(x), float(y)) for x, y in zip(xs, ys))
    logger.debug(f"Generated problem with {len(dataset)} points.")
    return dataset

import dataclasses

import numpy as np
import pytest

from regressionplayground.model.problem import DataPoint, dataset_arrays, generate_problem


def test_generate_problem_default_size_and_x_bounds() -> None:
    dataset = generate_problem(rng=np.random.default_rng(0))
    assert len(dataset) == 30
    assert all(-5.5 <= p.x < 5.7 for p in dataset)


def test_generate_problem_y_within_latent_and_noise_bounds() -> None:
    # |y| <= |intercept| + |slope| * |x| + |noise| <= 1 + 5.7 + 1
    dataset = generate_problem(200, np.random.default_rng(1))
    assert all(abs(p.y) <= 7.7 for p in dataset)


def test_generate_problem_is_reproducible_with_seed() -> None:
    first = generate_problem(10, np.random.default_rng(42))
    second = generate_problem(10, np.random.default_rng(42))
    assert first == second


def test_generate_problem_empty() -> None:
    assert generate_problem(0) == ()


def test_generate_problem_negative_count_raises() -> None:
    with pytest.raises(ValueError):
        generate_problem(-1)


def test_data_point_is_immutable() -> None:
    point = DataPoint(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 3.0  # type: ignore[misc]


def test_dataset_arrays_splits_coordinates() -> None:
    xs, ys = dataset_arrays((DataPoint(1.0, 2.0), DataPoint(3.0, 4.0)))
    assert xs.tolist() == [1.0, 3.0]
    assert ys.tolist() == [2.0, 4.0]


def test_generate_problem_draws_latent_line_per_point() -> None:
    n, seed = 50, 123
    dataset = generate_problem(n, np.random.default_rng(seed))

    rng = np.random.default_rng(seed)
    xs = rng.uniform(-5.5, 5.7, size=n)
    slopes = rng.uniform(-1.0, 1.0, size=n)
    intercepts = rng.uniform(-1.0, 1.0, size=n)
    noise = rng.uniform(-1.0, 1.0, size=n)
    expected = intercepts + slopes * xs + noise

    assert [p.x for p in dataset] == xs.tolist()
    assert [p.y for p in dataset] == expected.tolist()


def test_generate_problem_has_no_shared_latent_line() -> None:
    # A single latent line keeps least-squares residuals near the noise bound of 1;
    # per-point slopes spread y by several units at the ends of the x range
    dataset = generate_problem(200, np.random.default_rng(8))
    xs, ys = dataset_arrays(dataset)
    slope, intercept = np.polyfit(xs, ys, 1)
    residuals = ys - (intercept + slope * xs)
    assert np.max(np.abs(residuals)) > 2.0

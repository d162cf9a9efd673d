import math

import pytest

from gridslam import probability as pr


def test_gaussian_zero_stddev():
    assert pr.probability_density_gaussian(2.0, 2.0, 0.0) == 1
    assert pr.probability_density_gaussian(2.5, 2.0, 0.0) == 0


def test_gaussian_symmetric_and_peaked_at_mean():
    mean, stddev = 1.5, 0.7
    peak = pr.probability_density_gaussian(mean, mean, stddev)
    for offset in (0.1, 0.5, 1.0, 2.0):
        left = pr.probability_density_gaussian(mean - offset, mean, stddev)
        right = pr.probability_density_gaussian(mean + offset, mean, stddev)
        assert left == pytest.approx(right)
        assert left < peak


def test_gaussian_integrates_to_one():
    mean, stddev = -0.5, 0.3
    step = 0.001
    total = sum(
        pr.probability_density_gaussian(mean + (i * step), mean, stddev) * step
        for i in range(-5000, 5001)
    )
    assert total == pytest.approx(1.0, abs=1e-3)


def test_exponential_density():
    lam = 2.0
    assert pr.probability_density_exp(0.0, lam) == 0
    assert pr.probability_density_exp(-1.0, lam) == 0
    assert pr.probability_density_exp(1e-12, lam) == pytest.approx(lam)
    values = [pr.probability_density_exp(x / 10, lam) for x in range(1, 30)]
    assert values == sorted(values, reverse=True)


def test_uniform_density():
    assert pr.probability_density_uniform(0.5, 0.0, 4.0) * 4.0 == pytest.approx(1.0)
    assert pr.probability_density_uniform(4.0, 0.0, 4.0) * 4.0 == pytest.approx(1.0)
    assert pr.probability_density_uniform(4.1, 0.0, 4.0) == 0
    assert pr.probability_density_uniform(-0.1, 0.0, 4.0) == 0


def test_get_percentile_extremes():
    values = [3, 1, 2, 9, 7]
    assert pr.get_percentile(values, 0.0) == min(values)
    assert pr.get_percentile(values, 0.99) == max(values)
    assert values == [3, 1, 2, 9, 7]


def test_get_percentile_median():
    values = [5.0, 1.0, 3.0]
    assert pr.get_percentile(values, 0.5) == 3.0


def test_get_percentile_out_of_range():
    with pytest.raises(IndexError):
        pr.get_percentile([1, 2, 3], 1.0)
    with pytest.raises(IndexError):
        pr.get_percentile([], 0.0)
    assert math.isfinite(pr.get_percentile([1.0], 0.0))
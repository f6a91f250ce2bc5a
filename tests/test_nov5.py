import numpy as np
import pytest

from blastwave.nov5 import nov_5, nov_5_n


@pytest.mark.parametrize("size", [5, 6, 12, 65])
def test_constant_has_zero_derivative_positive(size):
    result = nov_5(np.full(size, 3.7), 0.1)
    assert result.shape == (size,)
    np.testing.assert_allclose(result, 0.0, atol=1e-9)


@pytest.mark.parametrize("size", [5, 6, 12, 65])
def test_constant_has_zero_derivative_negative(size):
    result = nov_5_n(np.full(size, 3.7), 0.1)
    assert result.shape == (size,)
    np.testing.assert_allclose(result, 0.0, atol=1e-9)


@pytest.mark.parametrize("size", [5, 9, 40])
def test_linear_profile_is_exact_positive(size):
    h = 0.25
    x = np.arange(size) * h
    result = nov_5(1.75 * x + 0.5, h)
    np.testing.assert_allclose(result, 1.75, rtol=1e-8)


@pytest.mark.parametrize("size", [5, 9, 40])
def test_linear_profile_is_exact_negative(size):
    h = 0.25
    x = np.arange(size) * h
    result = nov_5_n(1.75 * x + 0.5, h)
    np.testing.assert_allclose(result, 1.75, rtol=1e-8)


def test_result_scales_inversely_with_spacing():
    rng = np.random.default_rng(3)
    f = rng.normal(size=20)
    np.testing.assert_allclose(nov_5(f, 0.5), nov_5(f, 1.0) * 2.0, rtol=1e-10)
    np.testing.assert_allclose(nov_5_n(f, 0.5), nov_5_n(f, 1.0) * 2.0, rtol=1e-10)


def test_schemes_are_mirror_images():
    rng = np.random.default_rng(11)
    f = np.sin(np.linspace(0, 3, 30)) + 0.1 * rng.normal(size=30)
    np.testing.assert_allclose(
        nov_5(f[::-1], 0.1), -nov_5_n(f, 0.1)[::-1], rtol=1e-8, atol=1e-8
    )


def test_smooth_function_converges():
    x = np.linspace(0, 1, 101)
    h = x[1] - x[0]
    np.testing.assert_allclose(nov_5(np.sin(x), h), np.cos(x), atol=1e-5)
    np.testing.assert_allclose(nov_5_n(np.sin(x), h), np.cos(x), atol=1e-5)


def test_accepts_plain_lists():
    values = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    np.testing.assert_allclose(nov_5(values, 1.0), 1.0, rtol=1e-8)
    np.testing.assert_allclose(nov_5_n(values, 1.0), 1.0, rtol=1e-8)


def test_too_few_points_rejected_positive():
    with pytest.raises(ValueError):
        nov_5(np.ones(4), 1.0)


def test_too_few_points_rejected_negative():
    with pytest.raises(ValueError):
        nov_5_n(np.ones(4), 1.0)


def test_two_dimensional_input_rejected_positive():
    with pytest.raises(ValueError):
        nov_5(np.ones((6, 6)), 1.0)


def test_two_dimensional_input_rejected_negative():
    with pytest.raises(ValueError):
        nov_5_n(np.ones((6, 6)), 1.0)
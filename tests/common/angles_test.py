import numpy as np
import pytest

from ukf_fusion.common import normalize_angle


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (np.pi / 2, np.pi / 2),
        (np.pi, np.pi),
        (-np.pi, np.pi),
        (3 * np.pi / 2, -np.pi / 2),
        (-3 * np.pi / 2, np.pi / 2),
        (7 * np.pi + 0.1, -np.pi + 0.1),
        (-20 * np.pi + 0.25, 0.25),
    ],
)
def test_normalize_angle(angle, expected):
    np.testing.assert_allclose(normalize_angle(angle), expected, atol=1e-9)


def test_normalize_angle_is_idempotent():
    angles = np.linspace(-10 * np.pi, 10 * np.pi, 1001)
    wrapped = normalize_angle(angles)
    assert np.all(wrapped > -np.pi) and np.all(wrapped <= np.pi)
    np.testing.assert_array_equal(normalize_angle(wrapped), wrapped)


def test_normalize_angle_returns_float_for_scalar():
    assert isinstance(normalize_angle(4.0), float)


def test_normalize_angle_does_not_modify_input():
    angles = np.array([4.0, -4.0])
    normalize_angle(angles)
    np.testing.assert_array_equal(angles, np.array([4.0, -4.0]))


@pytest.mark.parametrize("angle", [np.inf, -np.inf, np.nan])
def test_normalize_angle_non_finite(angle):
    with pytest.raises(ValueError):
        normalize_angle(angle)

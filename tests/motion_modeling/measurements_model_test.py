import numpy as np
import pytest

from ukf_fusion.measurement_models import PositionMeasurementModel, RangeBearingRateMeasurementModel


@pytest.fixture
def radar_model():
    return RangeBearingRateMeasurementModel(sigma_r=0.3, sigma_b=0.0175, sigma_rd=0.1, random_state=42)


def test_position_measurement_model():
    model = PositionMeasurementModel(sigma_x=0.15, sigma_y=0.25)
    assert isinstance(model, PositionMeasurementModel)
    state_vector = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    np.testing.assert_allclose(model.h(state_vector), np.array([1.0, 2.0]))
    np.testing.assert_allclose(model.R, np.diag([0.15**2, 0.25**2]))
    assert model.dim == 2
    assert str(model) == f"PositionMeasurementModel(d=2, R={model.R.tolist()})"


def test_position_measurement_model_batch():
    model = PositionMeasurementModel(sigma_x=0.15, sigma_y=0.15)
    points = np.arange(15.0).reshape(3, 5)
    np.testing.assert_allclose(model.h(points), points[:, :2])


def test_range_bearing_rate_model(radar_model):
    state_vector = np.array([3.0, 4.0, 2.0, np.arctan2(4.0, 3.0), 0.1])
    measurement = radar_model.h(state_vector)
    # moving straight away from the sensor: range rate equals the speed
    np.testing.assert_allclose(measurement, np.array([5.0, np.arctan2(4.0, 3.0), 2.0]))
    np.testing.assert_allclose(radar_model.R, np.diag([0.3**2, 0.0175**2, 0.1**2]))
    assert radar_model.dim == 3


def test_range_bearing_rate_lesson_sigma_point(radar_model):
    state_vector = np.array([5.9374, 1.4880, 2.2049, 0.5367, 0.3528])
    expected = np.array(
        [
            np.hypot(5.9374, 1.4880),
            np.arctan2(1.4880, 5.9374),
            (5.9374 * np.cos(0.5367) + 1.4880 * np.sin(0.5367)) * 2.2049 / np.hypot(5.9374, 1.4880),
        ]
    )
    np.testing.assert_allclose(radar_model.h(state_vector), expected)


def test_range_bearing_rate_model_at_sensor_position(radar_model):
    with np.errstate(all="raise"):
        measurement = radar_model.h(np.array([0.0, 0.0, 3.0, 0.5, 0.0]))
    assert np.all(np.isfinite(measurement))
    np.testing.assert_allclose(measurement, np.zeros(3))


def test_range_bearing_rate_model_near_sensor_position_is_bounded(radar_model):
    measurement = radar_model.h(np.array([1e-12, 0.0, 3.0, 0.0, 0.0]))
    assert np.all(np.isfinite(measurement))
    assert abs(measurement[2]) <= 3.0


def test_range_bearing_rate_residual_wraps_bearing(radar_model):
    a = np.array([1.0, -np.pi + 0.05, 0.5])
    b = np.array([0.5, np.pi - 0.05, 0.0])
    np.testing.assert_allclose(radar_model.residual(a, b), np.array([0.5, 0.1, 0.5]), atol=1e-12)


def test_range_bearing_rate_residual_batch(radar_model):
    a = np.array([[1.0, 3.0, 0.0], [1.0, -3.0, 0.0]])
    b = np.array([0.0, -3.0, 0.0])
    residuals = radar_model.residual(a, b)
    np.testing.assert_allclose(residuals[:, 1], np.array([6.0 - 2 * np.pi, 0.0]), atol=1e-12)


def test_initial_position():
    lidar = PositionMeasurementModel(sigma_x=0.15, sigma_y=0.15)
    radar = RangeBearingRateMeasurementModel(sigma_r=0.3, sigma_b=0.03, sigma_rd=0.3)
    np.testing.assert_allclose(lidar.initial_position(np.array([1.0, 2.0])), np.array([1.0, 2.0]))
    np.testing.assert_allclose(radar.initial_position(np.array([2.0, np.pi / 2, 1.0])), np.array([0.0, 2.0]), atol=1e-12)


def test_observe_is_noisy_and_reproducible():
    state_vector = np.array([10.0, 5.0, 2.0, 0.3, 0.0])
    first = RangeBearingRateMeasurementModel(0.3, 0.03, 0.3, random_state=1).observe(state_vector)
    second = RangeBearingRateMeasurementModel(0.3, 0.03, 0.3, random_state=1).observe(state_vector)
    np.testing.assert_array_equal(first, second)
    assert first.shape == (3,)
    assert -np.pi < first[1] <= np.pi
    assert not np.allclose(first, RangeBearingRateMeasurementModel(0.3, 0.03, 0.3).h(state_vector))

import logging
import typing as tp

import numpy as np

from ukf_fusion.common import (
    Gaussian,
    Measurement,
    SensorType,
    augmented_sigma_points,
    cross_covariance,
    invert_pd_matrix,
    make_SPD,
    sigma_point_weights,
    unscented_moments,
)
from ukf_fusion.configs import UKFConfig
from ukf_fusion.measurement_models import MeasurementModel

MICROSECONDS_PER_SECOND = 1_000_000.0


class UnscentedKalmanFilter:
    """Unscented Kalman filter fusing lidar and radar measurements with a CTRV motion model

    The state is [px, py, v, yaw, yaw_rate]. Measurements are fed one at a time through
    process_measurement, in non-decreasing timestamp order; the filter does not reorder
    or detect out of order input. An instance is not safe for concurrent use.

    Attributes:
        state (Gaussian): current belief, None until the first accepted measurement
        is_initialized (bool): whether the belief has been seeded
        time_us (int): timestamp of the last processed measurement, microseconds
        sigma_points_pred (np.ndarray (2 * n_aug + 1, n_x)): sigma points of the last prediction
        weights (np.ndarray (2 * n_aug + 1)): sigma point weights
        nis_lidar (float): normalized innovation squared of the last lidar update
        nis_radar (float): normalized innovation squared of the last radar update
    """

    def __init__(self, config: tp.Optional[UKFConfig] = None) -> None:
        self.config = config if config is not None else UKFConfig()
        self.motion_model = self.config.motion_model()
        self.meas_models: tp.Dict[SensorType, MeasurementModel] = {
            SensorType.LINEAR: self.config.lidar_model(),
            SensorType.RANGE_BEARING: self.config.radar_model(),
        }
        self.weights = sigma_point_weights(self.config.n_aug, self.config.lambda_)
        self.reset()

    @property
    def name(self):
        return "CTRV Unscented Kalman Filter"

    def __repr__(self) -> str:
        return self.__class__.__name__ + f"(is_initialized={self.is_initialized}, time_us={self.time_us}, state={self.state})"

    def reset(self) -> None:
        """Drops the belief, the next accepted measurement initializes the filter again"""
        self.state: tp.Optional[Gaussian] = None
        self.is_initialized = False
        self.time_us = 0
        self.sigma_points_pred = np.zeros((2 * self.config.n_aug + 1, self.config.n_x))
        self.nis_lidar = 0.0
        self.nis_radar = 0.0

    @property
    def x(self) -> np.ndarray:
        return self.state.x if self.state is not None else self.config.prior_state()

    @property
    def P(self) -> np.ndarray:
        return self.state.P if self.state is not None else self.config.prior_covariance()

    def is_enabled(self, sensor_type: SensorType) -> bool:
        if sensor_type == SensorType.LINEAR:
            return self.config.enable_linear_sensor
        return self.config.enable_nonlinear_sensor

    def process_measurement(self, measurement: Measurement) -> None:
        """Runs one filter cycle for a single measurement

        The first accepted measurement seeds the belief, every following one triggers
        prediction to the measurement timestamp and the modality specific update.
        Measurements of a disabled modality are ignored.
        """
        if not self.is_enabled(measurement.sensor_type):
            logging.debug(f"{measurement.sensor_type.name} sensor disabled, skip measurement at t={measurement.timestamp}")
            return

        if not self.is_initialized:
            self.initialize(measurement)
            return

        dt = (measurement.timestamp - self.time_us) / MICROSECONDS_PER_SECOND
        self.time_us = measurement.timestamp

        self.predict(dt)

        if measurement.sensor_type == SensorType.LINEAR:
            self.update_lidar(measurement)
        else:
            self.update_radar(measurement)

    def initialize(self, measurement: Measurement) -> None:
        x = self.config.prior_state()
        x[:2] = self.meas_models[measurement.sensor_type].initial_position(measurement.raw)
        self.state = Gaussian(x=x, P=self.config.prior_covariance())
        self.time_us = measurement.timestamp
        self.is_initialized = True
        logging.debug(f"Filter initialized with {measurement}: {self.state}")

    def predict(self, dt: float) -> None:
        """Predicts sigma points, the state mean and the state covariance

        Args:
            dt (float): time elapsed since the last measurement, seconds

        Raises:
            CovarianceError: the current covariance is not positive definite
        """
        assert self.state is not None, "Filter is not initialized"
        sigma_points = augmented_sigma_points(self.state, self.motion_model.Q(), self.config.lambda_)
        self.sigma_points_pred = self.motion_model.f(sigma_points, dt)
        x, P = unscented_moments(self.sigma_points_pred, self.weights, residual=self.motion_model.residual)
        self.state = Gaussian(x=x, P=P)

    def update_lidar(self, measurement: Measurement) -> None:
        """Updates the state with a lidar measurement [px, py]"""
        assert measurement.sensor_type == SensorType.LINEAR
        self.nis_lidar = self._update(measurement.raw, self.meas_models[SensorType.LINEAR])

    def update_radar(self, measurement: Measurement) -> None:
        """Updates the state with a radar measurement [rho, phi, rho_dot]"""
        assert measurement.sensor_type == SensorType.RANGE_BEARING
        self.nis_radar = self._update(measurement.raw, self.meas_models[SensorType.RANGE_BEARING])

    def _update(self, z: np.ndarray, meas_model: MeasurementModel) -> float:
        """Unscented Kalman update with predicted sigma points

        Returns:
            nis (float): normalized innovation squared of the measurement
        """
        assert self.state is not None, "Filter is not initialized"
        # Transform sigma points into measurement space
        z_sigma = meas_model.h(self.sigma_points_pred)
        z_pred, S = unscented_moments(z_sigma, self.weights, residual=meas_model.residual)
        S = S + meas_model.R  # Innovation covariance

        T = cross_covariance(
            self.sigma_points_pred,
            self.state.x,
            z_sigma,
            z_pred,
            self.weights,
            x_residual=self.motion_model.residual,
            z_residual=meas_model.residual,
        )

        S_inv = invert_pd_matrix(S, eps=self.config.regularization_eps)
        K = T @ S_inv  # Kalman gain

        z_diff = meas_model.residual(z, z_pred)
        nis = float(z_diff @ S_inv @ z_diff)

        x = self.state.x + K @ z_diff
        P = make_SPD(self.state.P - K @ S @ K.T)
        self.state = Gaussian(x=x, P=P)
        return nis

    def estimate(self) -> Gaussian:
        return Gaussian(x=self.x.copy(), P=self.P.copy())

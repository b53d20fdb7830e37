import numpy as np

from ..common import normalize_angle
from .base_measurement_model import MeasurementModel

BEARING_INDEX = 1


class RangeBearingRateMeasurementModel(MeasurementModel):
    def __init__(self, sigma_r: float, sigma_b: float, sigma_rd: float, min_radius: float = 1e-4, *args, **kwargs):
        """Creates the range/bearing/range rate (radar) measurement model

        The sensor is placed at the origin.

        Parameters
        ----------
        sigma_r : scalar
            standard deviation of measurement noise added to range, m
        sigma_b : scalar
            standard deviation of measurement noise added to bearing, rad
        sigma_rd : scalar
            standard deviation of measurement noise added to range rate, m/s
        min_radius : scalar
            floor of the distance to the sensor in the denominators of the model,
            bearing and range rate are undefined at the sensor position

        Attributes
        ----------
        d (scalar): measurement dimension
        R (3 x 3 matrix): measurement noise covariance
        """
        assert min_radius > 0.0, "min_radius should be positive!"
        self.d = 3
        self.sigma_r = sigma_r
        self.sigma_b = sigma_b
        self.sigma_rd = sigma_rd
        self.min_radius = min_radius
        self.R = np.diag([np.power(self.sigma_r, 2), np.power(self.sigma_b, 2), np.power(self.sigma_rd, 2)])
        super(RangeBearingRateMeasurementModel, self).__init__(*args, **kwargs)

    def __repr__(self) -> str:
        return self.__class__.__name__ + f"(d={self.d}, R={self.R.tolist()}, min_radius={self.min_radius})"

    def h(self, state_vectors: np.ndarray) -> np.ndarray:
        """Handle to generate measurement

        Parameters
        ----------
        state_vectors : np.ndarray (N x 5) or a single 5 - vector
            CTRV states

        Returns
        -------
        np.ndarray (N x 3) or a single 3 - vector
            [range, bearing, range rate]
        """
        state_vectors = np.asarray(state_vectors, dtype=float)
        pos_x, pos_y, v, yaw = (state_vectors[..., idx] for idx in range(4))

        rng = np.hypot(pos_x, pos_y)
        safe_rng = np.maximum(rng, self.min_radius)
        bearing = np.arctan2(pos_y, pos_x)
        range_rate = (pos_x * v * np.cos(yaw) + pos_y * v * np.sin(yaw)) / safe_rng
        return np.stack([rng, bearing, range_rate], axis=-1)

    def residual(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        diff = np.array(a, dtype=float) - b
        diff[..., BEARING_INDEX] = normalize_angle(diff[..., BEARING_INDEX])
        return diff

    def observe(self, state_vector: np.ndarray) -> np.ndarray:
        observation = super(RangeBearingRateMeasurementModel, self).observe(state_vector)
        observation[BEARING_INDEX] = normalize_angle(observation[BEARING_INDEX])
        return observation

    def initial_position(self, raw: np.ndarray) -> np.ndarray:
        rho, phi = raw[0], raw[1]
        return np.array([rho * np.cos(phi), rho * np.sin(phi)])

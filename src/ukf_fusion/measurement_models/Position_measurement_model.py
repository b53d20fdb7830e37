import numpy as np

from .base_measurement_model import MeasurementModel


class PositionMeasurementModel(MeasurementModel):
    def __init__(self, sigma_x: float, sigma_y: float, *args, **kwargs):
        """Creates the linear position (lidar) measurement model for the CTRV state

        Args:
            sigma_x (scalar): standard deviation of measurement noise of X-position, m
            sigma_y (scalar): standard deviation of measurement noise of Y-position, m

        Attributes:
            d (scalar): measurement dimension
            H (2 x 5 matrix): observation matrix
            R (2 x 2 matrix): measurement noise covariance

        Notes: the first two entries of the state vector represents
               the X-position and Y-position, respectively.
        """
        self.d = 2
        self.sigma_x = sigma_x
        self.sigma_y = sigma_y
        self.H = np.array([[1.0, 0.0, 0.0, 0.0, 0.0], [0.0, 1.0, 0.0, 0.0, 0.0]])
        self.R = np.diag([sigma_x**2, sigma_y**2])
        super(PositionMeasurementModel, self).__init__(*args, **kwargs)

    def __repr__(self) -> str:
        return self.__class__.__name__ + f"(d={self.d}, R={self.R.tolist()})"

    def h(self, state_vectors: np.ndarray) -> np.ndarray:
        return np.asarray(state_vectors, dtype=float)[..., :5] @ self.H.T

    def initial_position(self, raw: np.ndarray) -> np.ndarray:
        return np.array(raw[:2], dtype=float)

import enum
from dataclasses import dataclass

import numpy as np


class SensorType(enum.Enum):
    LINEAR = "L"  # lidar: position only
    RANGE_BEARING = "R"  # radar: range, bearing, range rate


MEASUREMENT_DIMS = {SensorType.LINEAR: 2, SensorType.RANGE_BEARING: 3}


@dataclass
class Gaussian:
    """Describes state of object

    Parameters
    ----------
    x : np.ndarray (N), N - state dimension
        describes state vector of object
    P : np.ndarray (N x N), N - state dimension
        describes covariance of state of object
    """

    x: np.ndarray
    P: np.ndarray

    def __post_init__(self):
        assert isinstance(self.x, np.ndarray), "Argument of wrong type!"
        assert isinstance(self.P, np.ndarray), "Argument of wrong type!"
        assert self.x.ndim == 1, "x must be N - vector"
        assert self.P.ndim == 2, "P must be N x N matrix"
        assert self.P.shape[0] == self.P.shape[1], "Covariance matrix should be square!"
        assert self.P.shape[0] == self.x.shape[0], "size of vector should be equal P column size!"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} " f"x = {np.array2string(self.x, max_line_width=np.inf, precision=3)}"

    @property
    def dim(self) -> int:
        return self.x.shape[0]


@dataclass
class Measurement:
    """Single timestamped sensor observation

    Parameters
    ----------
    sensor_type : SensorType
        modality which produced the observation
    raw : np.ndarray (2) for LINEAR [px, py], (3) for RANGE_BEARING [rho, phi, rho_dot]
        raw observation vector
    timestamp : int
        time of the observation in microseconds
    """

    sensor_type: SensorType
    raw: np.ndarray
    timestamp: int

    def __post_init__(self):
        assert isinstance(self.sensor_type, SensorType), "Argument of wrong type!"
        self.raw = np.asarray(self.raw, dtype=float)
        assert self.raw.ndim == 1, "raw must be a vector"
        assert self.raw.shape[0] == MEASUREMENT_DIMS[self.sensor_type], (
            f"{self.sensor_type.name} measurement must have " f"{MEASUREMENT_DIMS[self.sensor_type]} components, got {self.raw.shape[0]}"
        )
        assert isinstance(self.timestamp, (int, np.integer)), "timestamp must be integer microseconds"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.sensor_type.name}, t={self.timestamp}, " f"raw={np.array2string(self.raw, precision=3)})"


def cartesian_projection(state_vectors: np.ndarray) -> np.ndarray:
    """Reduces CTRV states [px, py, v, yaw, yaw_rate] to [px, py, vx, vy]

    Accepts a single state vector or a batch of them (N x 5).
    """
    state_vectors = np.asarray(state_vectors, dtype=float)
    pos_x, pos_y, v, yaw = (state_vectors[..., idx] for idx in range(4))
    return np.stack([pos_x, pos_y, v * np.cos(yaw), v * np.sin(yaw)], axis=-1)

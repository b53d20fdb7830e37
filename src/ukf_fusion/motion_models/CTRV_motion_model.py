import numpy as np

from ..common import normalize_angle
from .base_motion_model import MotionModel

YAW_INDEX = 3


class ConstantTurnRateVelocityMotionModel(MotionModel):
    def __init__(self, sigma_a: float, sigma_yawdd: float, yaw_rate_threshold: float = 1e-3, *args, **kwargs):
        """Creates a 2D constant turn rate and velocity magnitude (CTRV) model

        Note:
            the motion model assumes that the state vector x consists of the following states:
            px -> X position
            py -> Y position
            v  -> velocity magnitude
            yaw -> heading
            yaw_rate -> turn rate
            Process noise enters as longitudinal acceleration nu_a and yaw acceleration nu_yawdd,
            which augment the state to 7 dimensions during sigma point propagation.

        Attributes:
            d (scalar): object state dimension
            n_noise (scalar): number of process noise variables
            Q (2 x 2 matrix): process noise covariance of (nu_a, nu_yawdd)

        Args:
            sigma_a (scalar): standard deviation of longitudinal acceleration noise, m/s^2
            sigma_yawdd (scalar): standard deviation of yaw acceleration noise, rad/s^2
            yaw_rate_threshold (scalar): yaw rates with smaller magnitude use the straight line motion
        """
        assert sigma_a >= 0.0, "standard deviation should be non-negative!"
        assert sigma_yawdd >= 0.0, "standard deviation should be non-negative!"
        assert yaw_rate_threshold > 0.0, "yaw rate threshold should be positive!"
        self.d = 5
        self.n_noise = 2
        self.sigma_a = sigma_a
        self.sigma_yawdd = sigma_yawdd
        self.yaw_rate_threshold = yaw_rate_threshold
        super(ConstantTurnRateVelocityMotionModel, self).__init__(*args, **kwargs)

    def __repr__(self) -> str:
        return self.__class__.__name__ + (
            f"(d={self.d}, " f"sigma_a={self.sigma_a}, " f"sigma_yawdd={self.sigma_yawdd}, " f"yaw_rate_threshold={self.yaw_rate_threshold})"
        )

    def f(self, state_vectors: np.ndarray, dt: float) -> np.ndarray:
        """Propagates states through the CTRV model

        Args:
            state_vectors (np.ndarray (N x 7) or (N x 5) or a single vector): states, optionally
                augmented with the noise values [nu_a, nu_yawdd]; absent noise is treated as zero
            dt (float): elapsed time in seconds

        Returns:
            np.ndarray (N x 5) or a single 5 - vector: predicted states
        """
        state_vectors = np.asarray(state_vectors, dtype=float)
        is_single = state_vectors.ndim == 1
        points = np.atleast_2d(state_vectors)
        assert points.shape[-1] in (self.d, self.d + self.n_noise), f"unexpected state size {points.shape[-1]}"

        pos_x, pos_y, v, yaw, yaw_rate = (points[:, idx] for idx in range(self.d))
        if points.shape[-1] == self.d + self.n_noise:
            nu_a, nu_yawdd = points[:, 5], points[:, 6]
        else:
            nu_a = nu_yawdd = np.zeros(points.shape[0])

        is_turning = np.abs(yaw_rate) > self.yaw_rate_threshold
        safe_yaw_rate = np.where(is_turning, yaw_rate, 1.0)
        next_yaw = yaw + yaw_rate * dt

        pred_x = np.where(
            is_turning,
            pos_x + v / safe_yaw_rate * (np.sin(next_yaw) - np.sin(yaw)),
            pos_x + v * dt * np.cos(yaw),
        )
        pred_y = np.where(
            is_turning,
            pos_y + v / safe_yaw_rate * (np.cos(yaw) - np.cos(next_yaw)),
            pos_y + v * dt * np.sin(yaw),
        )

        predicted = np.column_stack(
            [
                pred_x + 0.5 * nu_a * dt**2 * np.cos(yaw),
                pred_y + 0.5 * nu_a * dt**2 * np.sin(yaw),
                v + nu_a * dt,
                next_yaw + 0.5 * nu_yawdd * dt**2,
                yaw_rate + nu_yawdd * dt,
            ]
        )
        return predicted[0] if is_single else predicted

    def Q(self):
        """Process noise covariance of the augmented noise variables (nu_a, nu_yawdd)"""
        return np.diag([self.sigma_a**2, self.sigma_yawdd**2])

    def residual(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        diff = np.array(a, dtype=float) - b
        diff[..., YAW_INDEX] = normalize_angle(diff[..., YAW_INDEX])
        return diff

    def move(self, state_vector: np.ndarray, dt: float, if_noisy: bool = False) -> np.ndarray:
        assert isinstance(dt, float)
        state_vector = np.asarray(state_vector, dtype=float)
        assert state_vector.shape == (self.d,), f"Argument of wrong shape! Shape = {state_vector.shape}"
        if if_noisy:
            noise = self._generator.multivariate_normal(mean=np.zeros(self.n_noise), cov=self.Q())
        else:
            noise = np.zeros(self.n_noise)
        return self.f(np.concatenate([state_vector, noise]), dt)

import typing as tp
from dataclasses import dataclass, field

import numpy as np

from ukf_fusion.measurement_models import PositionMeasurementModel, RangeBearingRateMeasurementModel
from ukf_fusion.motion_models import ConstantTurnRateVelocityMotionModel

STATE_DIM = 5
PROCESS_NOISE_DIM = 2


@dataclass(frozen=True)
class UKFConfig:
    """Configuration of the unscented Kalman filter, immutable for the lifetime of a filter

    Parameters
    ----------
    enable_linear_sensor : bool
        if False, lidar measurements are ignored
    enable_nonlinear_sensor : bool
        if False, radar measurements are ignored
    accel_noise_std : float
        process noise standard deviation of longitudinal acceleration, m/s^2
    yaw_accel_noise_std : float
        process noise standard deviation of yaw acceleration, rad/s^2
    linear_pos_x_std, linear_pos_y_std : float
        lidar measurement noise standard deviation of X and Y position, m
    range_std : float
        radar measurement noise standard deviation of range, m
    bearing_std : float
        radar measurement noise standard deviation of bearing, rad
    range_rate_std : float
        radar measurement noise standard deviation of range rate, m/s
    initial_state : tuple
        prior state [px, py, v, yaw, yaw_rate], position is overwritten by the first measurement
    initial_covariance_diag : tuple
        diagonal of the prior covariance
    spread : float, optional
        sigma point spreading parameter lambda, 3 - n_aug if not given
    yaw_rate_threshold : float
        yaw rates with smaller magnitude are propagated along a straight line
    min_radius : float
        floor of the target distance in the radar model denominators
    regularization_eps : float
        initial diagonal loading of an innovation covariance that fails to factorize
    """

    enable_linear_sensor: bool = True
    enable_nonlinear_sensor: bool = True
    accel_noise_std: float = 2.0
    yaw_accel_noise_std: float = 2.0
    linear_pos_x_std: float = 0.15
    linear_pos_y_std: float = 0.15
    range_std: float = 0.3
    bearing_std: float = 0.03
    range_rate_std: float = 0.3
    initial_state: tp.Tuple[float, ...] = (1.0, 1.0, 1.0, 1.0, 0.1)
    initial_covariance_diag: tp.Tuple[float, ...] = (0.15, 0.15, 1.0, 1.0, 1.0)
    spread: tp.Optional[float] = None
    yaw_rate_threshold: float = 1e-3
    min_radius: float = 1e-4
    regularization_eps: float = 1e-9
    random_state: tp.Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        for name in ("accel_noise_std", "yaw_accel_noise_std"):
            assert getattr(self, name) > 0.0, f"{name} should be positive, process noise spans the augmented covariance!"
        for name in (
            "linear_pos_x_std",
            "linear_pos_y_std",
            "range_std",
            "bearing_std",
            "range_rate_std",
        ):
            assert getattr(self, name) >= 0.0, f"{name} should be non-negative!"
        assert len(self.initial_state) == STATE_DIM, f"initial state must have {STATE_DIM} components"
        assert len(self.initial_covariance_diag) == STATE_DIM, f"initial covariance must have {STATE_DIM} diagonal entries"
        assert all(variance > 0.0 for variance in self.initial_covariance_diag), "prior covariance should be positive definite!"
        assert self.lambda_ + self.n_aug > 0, "spread + n_aug should be positive!"
        assert self.yaw_rate_threshold > 0.0
        assert self.min_radius > 0.0
        assert self.regularization_eps > 0.0

    @property
    def n_x(self) -> int:
        return STATE_DIM

    @property
    def n_aug(self) -> int:
        return STATE_DIM + PROCESS_NOISE_DIM

    @property
    def lambda_(self) -> float:
        return 3.0 - self.n_aug if self.spread is None else self.spread

    def prior_state(self) -> np.ndarray:
        return np.array(self.initial_state, dtype=float)

    def prior_covariance(self) -> np.ndarray:
        return np.diag(np.array(self.initial_covariance_diag, dtype=float))

    def motion_model(self) -> ConstantTurnRateVelocityMotionModel:
        return ConstantTurnRateVelocityMotionModel(
            sigma_a=self.accel_noise_std,
            sigma_yawdd=self.yaw_accel_noise_std,
            yaw_rate_threshold=self.yaw_rate_threshold,
            random_state=self.random_state,
        )

    def lidar_model(self) -> PositionMeasurementModel:
        return PositionMeasurementModel(
            sigma_x=self.linear_pos_x_std,
            sigma_y=self.linear_pos_y_std,
            random_state=self.random_state,
        )

    def radar_model(self) -> RangeBearingRateMeasurementModel:
        return RangeBearingRateMeasurementModel(
            sigma_r=self.range_std,
            sigma_b=self.bearing_std,
            sigma_rd=self.range_rate_std,
            min_radius=self.min_radius,
            random_state=self.random_state,
        )

# flake8: noqa

from ukf_fusion.common import Gaussian, Measurement, SensorType, cartesian_projection, normalize_angle
from ukf_fusion.configs import UKFConfig
from ukf_fusion.exceptions import CovarianceError, UKFError
from ukf_fusion.measurement_models import PositionMeasurementModel, RangeBearingRateMeasurementModel
from ukf_fusion.metrics import RMSE, NIS_exceedance_ratio
from ukf_fusion.motion_models import ConstantTurnRateVelocityMotionModel
from ukf_fusion.simulator import MeasurementData, ObjectData
from ukf_fusion.trackers import UnscentedKalmanFilter

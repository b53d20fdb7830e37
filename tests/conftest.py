import numpy as np
import pytest

from ukf_fusion.common import Gaussian, Measurement, SensorType
from ukf_fusion.configs import UKFConfig
from ukf_fusion.trackers import UnscentedKalmanFilter


@pytest.fixture
def ukf_config():
    return UKFConfig()


@pytest.fixture
def ukf(ukf_config):
    return UnscentedKalmanFilter(ukf_config)


@pytest.fixture
def lidar_measurement():
    return Measurement(sensor_type=SensorType.LINEAR, raw=np.array([1.0, 2.0]), timestamp=0)


@pytest.fixture
def radar_measurement():
    return Measurement(sensor_type=SensorType.RANGE_BEARING, raw=np.array([5.0, 0.0, 0.0]), timestamp=0)


@pytest.fixture
def initialized_ukf(ukf, lidar_measurement):
    ukf.process_measurement(lidar_measurement)
    return ukf


@pytest.fixture(scope="function")
def ctrv_state():
    return Gaussian(
        x=np.array([5.7441, 1.3800, 2.2049, 0.5015, 0.3528]),
        P=np.array(
            [
                [0.0043, -0.0013, 0.0030, -0.0022, -0.0020],
                [-0.0013, 0.0077, 0.0011, 0.0071, 0.0060],
                [0.0030, 0.0011, 0.0054, 0.0007, 0.0008],
                [-0.0022, 0.0071, 0.0007, 0.0098, 0.0100],
                [-0.0020, 0.0060, 0.0008, 0.0100, 0.0123],
            ]
        ),
    )

import dataclasses
import logging
import typing as tp
from dataclasses import dataclass

import numpy as np
from tqdm import tqdm as tqdm

from ukf_fusion.common import Measurement, SensorType, cartesian_projection
from ukf_fusion.configs import UKFConfig
from ukf_fusion.metrics import RMSE, NIS_exceedance_ratio
from ukf_fusion.motion_models import ConstantTurnRateVelocityMotionModel
from ukf_fusion.simulator import MeasurementData, ObjectData
from ukf_fusion.trackers import UnscentedKalmanFilter
from ukf_fusion.utils import Timer


@dataclass
class TrackingResult:
    estimations: np.ndarray  # N x 4, [px, py, vx, vy]
    ground_truth: np.ndarray  # N x 4, [px, py, vx, vy]
    nis: tp.Dict[SensorType, np.ndarray]
    rmse: np.ndarray
    nis_exceedance: tp.Dict[SensorType, float]


@Timer()
def track(
    measurements: tp.Iterable[Measurement],
    estimator: UnscentedKalmanFilter,
    progress: bool = False,
) -> tp.Tuple[np.ndarray, tp.Dict[SensorType, np.ndarray]]:
    """Feeds a measurement stream to the estimator

    Returns:
        estimations (np.ndarray (N x 4)): estimate after every measurement, [px, py, vx, vy]
        nis (dict): NIS of every update, per sensor type; the initializing measurement has none
    """
    estimations = []
    nis = {SensorType.LINEAR: [], SensorType.RANGE_BEARING: []}
    for measurement in tqdm(measurements, disable=not progress):
        was_initialized = estimator.is_initialized
        estimator.process_measurement(measurement)
        estimations.append(cartesian_projection(estimator.x))

        if was_initialized and estimator.is_enabled(measurement.sensor_type):
            last_nis = estimator.nis_lidar if measurement.sensor_type == SensorType.LINEAR else estimator.nis_radar
            nis[measurement.sensor_type].append(last_nis)

    return np.array(estimations), {sensor: np.array(values) for sensor, values in nis.items()}


def run_filter(
    initial_state: np.ndarray,
    total_steps: int = 500,
    dt: float = 0.05,
    env_sigma_a: float = 0.5,
    env_sigma_yawdd: float = 0.3,
    config: tp.Optional[UKFConfig] = None,
    sensor_order: tp.Sequence[SensorType] = (SensorType.LINEAR, SensorType.RANGE_BEARING),
    random_state: tp.Optional[int] = None,
    progress: bool = False,
) -> TrackingResult:
    """Simulates a CTRV object observed by lidar and radar and tracks it

    The environment generates noisy groundtruth with its own process noise, measurements are
    drawn with the sensor noise of the filter configuration.
    """
    config = config if config is not None else UKFConfig()
    env_motion_model = ConstantTurnRateVelocityMotionModel(sigma_a=env_sigma_a, sigma_yawdd=env_sigma_yawdd, random_state=random_state)
    object_data = ObjectData(initial_state, env_motion_model, total_steps=total_steps, dt=dt, if_noisy=True)

    sensor_config = dataclasses.replace(config, random_state=random_state)
    meas_data = MeasurementData(
        object_data,
        meas_models={SensorType.LINEAR: sensor_config.lidar_model(), SensorType.RANGE_BEARING: sensor_config.radar_model()},
        sensor_order=sensor_order,
    )

    estimator = UnscentedKalmanFilter(config)
    with Timer(logger=logging.info, name=f"{estimator.name} on {len(meas_data)} measurements"):
        estimations, nis = track(meas_data, estimator, progress=progress)

    ground_truth = cartesian_projection(meas_data.ground_truth)
    rmse = RMSE(list(estimations), list(ground_truth))
    nis_exceedance = {sensor: NIS_exceedance_ratio(values, df=estimator.meas_models[sensor].dim) for sensor, values in nis.items()}

    logging.info(f"RMSE [px, py, vx, vy] = {np.array2string(rmse, precision=3)}")
    for sensor, ratio in nis_exceedance.items():
        logging.info(f"{sensor.name} NIS above 95% chi-square quantile: {ratio:.1%} of {len(nis[sensor])} updates")

    return TrackingResult(
        estimations=estimations,
        ground_truth=ground_truth,
        nis=nis,
        rmse=rmse,
        nis_exceedance=nis_exceedance,
    )

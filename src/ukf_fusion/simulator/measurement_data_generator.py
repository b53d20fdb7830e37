import itertools
import typing as tp

import numpy as np

from ..common import Measurement, SensorType
from ..measurement_models import MeasurementModel
from .object_data_generator import ObjectData


class MeasurementData:
    """Generates timestamped sensor measurements of a single object"""

    def __init__(
        self,
        object_data: ObjectData,
        meas_models: tp.Dict[SensorType, MeasurementModel],
        sensor_order: tp.Sequence[SensorType] = (SensorType.LINEAR, SensorType.RANGE_BEARING),
        start_time_us: int = 0,
    ):
        """Generates one measurement per groundtruth timestep, cycling over sensors

        Args:
            object_data (ObjectData): groundtruth object states
            meas_models (dict): measurement model per sensor type
            sensor_order (sequence of SensorType): sensors take turns in this order
            start_time_us (int): timestamp of the first measurement, microseconds

        Attributes:
            measurements (tuple of Measurement): generated measurements, ordered in time
            ground_truth (np.ndarray (total_steps x state_dim)): object state at each measurement
        """
        assert len(sensor_order) > 0, "At least one sensor is needed"
        assert all(sensor in meas_models for sensor in sensor_order), "Measurement model is missing for a sensor"
        self.object_data = object_data
        self.meas_models = meas_models
        self.sensor_order = tuple(sensor_order)
        self.start_time_us = start_time_us
        self.measurements = self.generate()

    def generate(self) -> tp.Tuple[Measurement, ...]:
        dt_us = int(round(self.object_data.dt * 1e6))
        measurements = []
        sensors = itertools.cycle(self.sensor_order)
        for timestep, (sensor_type, state) in enumerate(zip(sensors, self.object_data.states)):
            measurements.append(
                Measurement(
                    sensor_type=sensor_type,
                    raw=self.meas_models[sensor_type].observe(state),
                    timestamp=self.start_time_us + timestep * dt_us,
                )
            )
        return tuple(measurements)

    @property
    def ground_truth(self) -> np.ndarray:
        return self.object_data.states

    def __len__(self):
        return len(self.measurements)

    def __getitem__(self, key):
        return self.measurements[key]

    def __iter__(self):
        return iter(self.measurements)

    def __repr__(self) -> str:
        return self.__class__.__name__ + (
            f"(meas_models={list(self.meas_models.values())}, " f"sensor_order={[sensor.name for sensor in self.sensor_order]}, " f"N={len(self)})"
        )

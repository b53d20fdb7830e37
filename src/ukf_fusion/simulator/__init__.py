# flake8: noqa

from .measurement_data_generator import MeasurementData
from .object_data_generator import ObjectData

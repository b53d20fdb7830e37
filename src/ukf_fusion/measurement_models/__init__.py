# flake8: noqa

from .base_measurement_model import MeasurementModel
from .Position_measurement_model import PositionMeasurementModel
from .RangeBearingRate_model import RangeBearingRateMeasurementModel

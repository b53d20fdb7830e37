# flake8: noqa

from .base_motion_model import MotionModel
from .CTRV_motion_model import ConstantTurnRateVelocityMotionModel

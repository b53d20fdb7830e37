# flake8: noqa

from .NIS import NIS_exceedance_ratio
from .RMSE import RMSE

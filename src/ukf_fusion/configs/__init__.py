# flake8: noqa

from .ukf_config import UKFConfig

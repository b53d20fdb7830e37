# flake8: noqa

from .ukf_tracker import UnscentedKalmanFilter

# flake8: noqa

from ukf_fusion.common.angles import normalize_angle
from ukf_fusion.common.state import (
    Gaussian,
    Measurement,
    SensorType,
    cartesian_projection,
)
from ukf_fusion.common.unscented_transform import (
    augmented_sigma_points,
    cross_covariance,
    invert_pd_matrix,
    make_SPD,
    sigma_point_weights,
    unscented_moments,
)

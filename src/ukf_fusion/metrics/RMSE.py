import logging
import typing as tp

import numpy as np

COMPARABLE_DIM = 4


def RMSE(estimations: tp.Sequence[np.ndarray], ground_truth: tp.Sequence[np.ndarray]) -> np.ndarray:
    """RMSE - elementwise root mean squared error of an estimated trajectory

    Parameters
    ----------
    estimations : sequence of np.array (4), [px, py, vx, vy]
        object state estimations, ordered in time
    ground_truth : sequence of np.array (4), [px, py, vx, vy]
        ground truth states paired with the estimations

    Returns
    -------
    np.ndarray (4)
        root mean squared error per component, zeros if the sequences are empty
        or differ in length
    """
    if len(estimations) != len(ground_truth) or len(estimations) == 0:
        logging.error(
            f"Can not calculate RMSE: got {len(estimations)} estimations and {len(ground_truth)} ground truth states, "
            f"sizes should be equal and non-zero"
        )
        return np.zeros(COMPARABLE_DIM)

    residuals = np.asarray(estimations, dtype=float) - np.asarray(ground_truth, dtype=float)
    return np.sqrt(np.mean(residuals**2, axis=0))

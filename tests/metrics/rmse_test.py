import logging

import numpy as np
import pytest

from ukf_fusion.metrics import RMSE


def test_rmse_of_identical_sequences():
    v = np.array([0.6, -1.2, 3.5, 0.1])
    np.testing.assert_array_equal(RMSE([v], [v]), np.zeros(4))


def test_rmse():
    estimations = [np.array([1.0, 1.0, 0.2, 0.1]), np.array([2.0, 2.0, 0.3, 0.2]), np.array([3.0, 3.0, 0.4, 0.3])]
    ground_truth = [np.array([1.1, 1.1, 0.3, 0.2]), np.array([2.1, 2.1, 0.4, 0.3]), np.array([3.1, 3.1, 0.5, 0.4])]
    np.testing.assert_allclose(RMSE(estimations, ground_truth), np.array([0.1, 0.1, 0.1, 0.1]))


def test_rmse_is_elementwise():
    estimations = [np.array([1.0, 0.0, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0, 2.0])]
    ground_truth = [np.zeros(4), np.zeros(4)]
    np.testing.assert_allclose(RMSE(estimations, ground_truth), np.array([1.0, 0.0, 0.0, np.sqrt(2.0)]))


@pytest.mark.parametrize(
    "estimations, ground_truth",
    [
        ([], []),
        ([np.ones(4)], []),
        ([np.ones(4), np.ones(4)], [np.zeros(4)]),
    ],
)
def test_rmse_invalid_input(estimations, ground_truth, caplog):
    with caplog.at_level(logging.ERROR):
        rmse = RMSE(estimations, ground_truth)
    np.testing.assert_array_equal(rmse, np.zeros(4))
    assert "Can not calculate RMSE" in caplog.text

from __future__ import annotations

import logging
import typing as tp

import numpy as np
from scipy.linalg import block_diag, cholesky

from ukf_fusion.common.state import Gaussian
from ukf_fusion.exceptions import CovarianceError

Residual = tp.Callable[[np.ndarray, np.ndarray], np.ndarray]


def make_SPD(covariance: np.ndarray) -> np.ndarray:
    return 0.5 * (covariance + covariance.swapaxes(-1, -2))


def plain_residual(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a - b


def sigma_point_weights(n_aug: int, lambda_: float) -> np.ndarray:
    """Weights of the 2 * n_aug + 1 sigma points

    The central weight is lambda / (lambda + n_aug) (negative for the usual lambda = 3 - n_aug),
    the rest share 0.5 / (lambda + n_aug). The weights sum up to 1.
    """
    assert lambda_ + n_aug > 0, "lambda + n_aug must be positive"
    weights = np.full(2 * n_aug + 1, 0.5 / (lambda_ + n_aug))
    weights[0] = lambda_ / (lambda_ + n_aug)
    return weights


def augmented_sigma_points(state: Gaussian, process_noise_cov: np.ndarray, lambda_: float) -> np.ndarray:
    """Generates sigma points of the state augmented with process noise

    Args:
        state (Gaussian): current state mean and covariance, N - state dimension
        process_noise_cov (np.ndarray (M x M)): covariance of the process noise variables
        lambda_ (float): sigma point spreading parameter

    Returns:
        sigma_points (np.ndarray (2 * (N + M) + 1, N + M)): one augmented sigma point per row

    Raises:
        CovarianceError: the augmented covariance is not positive definite
    """
    x_aug = np.concatenate([state.x, np.zeros(process_noise_cov.shape[0])])
    P_aug = block_diag(state.P, process_noise_cov)
    n_aug = x_aug.shape[0]

    try:
        L = cholesky(P_aug, lower=True)
    except (np.linalg.LinAlgError, ValueError) as exc:  # ValueError on non-finite entries
        logging.error(f"Cholesky factorization failed for augmented covariance\n{P_aug}")
        raise CovarianceError("augmented covariance is not positive definite") from exc

    spread = np.sqrt(lambda_ + n_aug) * L.T  # rows are scaled columns of L
    return np.vstack([x_aug, x_aug + spread, x_aug - spread])


def unscented_moments(
    points: np.ndarray,
    weights: np.ndarray,
    residual: Residual = plain_residual,
) -> tp.Tuple[np.ndarray, np.ndarray]:
    """Weighted mean and covariance of a set of sigma points

    Args:
        points (np.ndarray (K x D)): sigma points, one per row
        weights (np.ndarray (K)): sigma point weights
        residual (callable): difference operation between points and the mean,
            used to inject angle wrapping for angular components

    The mean is accumulated as wrapped offsets from the first point, so angular
    components spread across +-pi average on the circle. Angular components of the
    returned mean are wrapped by the residual as well.

    Returns:
        mean (np.ndarray (D)), covariance (np.ndarray (D x D))
    """
    center = points[0]
    mean = residual(center + weights @ residual(points, center), np.zeros_like(center))
    deviations = residual(points, mean)
    covariance = np.einsum("k,ki,kj->ij", weights, deviations, deviations)
    return mean, make_SPD(covariance)


def cross_covariance(
    x_points: np.ndarray,
    x_mean: np.ndarray,
    z_points: np.ndarray,
    z_mean: np.ndarray,
    weights: np.ndarray,
    x_residual: Residual = plain_residual,
    z_residual: Residual = plain_residual,
) -> np.ndarray:
    x_deviations = x_residual(x_points, x_mean)
    z_deviations = z_residual(z_points, z_mean)
    return np.einsum("k,ki,kj->ij", weights, x_deviations, z_deviations)


def invert_pd_matrix(A: np.ndarray, eps: float = 1e-9) -> np.ndarray:
    """Inverts a positive definite matrix through its Cholesky factor

    A matrix which is not numerically positive definite is regularized with eps * I,
    growing eps until the factorization succeeds.
    """
    A = make_SPD(A)
    regularization = 0.0
    while True:
        try:
            L = cholesky(A + regularization * np.eye(A.shape[0]), lower=True)
            break
        except np.linalg.LinAlgError:
            regularization = eps if regularization == 0.0 else 10.0 * regularization
            logging.warning(f"Matrix is not positive definite, regularize with {regularization:.1e} * I")
    L_inv = np.linalg.inv(L)
    return L_inv.T @ L_inv

class UKFError(RuntimeError):
    """Base exception for filter errors."""


class CovarianceError(UKFError):
    """Raised when a covariance matrix is not positive definite and can not be factorized.

    The filter state is unusable after this error, the session should be reset.
    """

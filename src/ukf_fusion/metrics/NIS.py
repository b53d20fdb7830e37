import numpy as np
from scipy.stats import chi2


def NIS_exceedance_ratio(nis_values, df: int, confidence_level: float = 0.95) -> float:
    """Fraction of normalized innovation squared samples above the chi-square quantile

    For a consistent filter NIS follows a chi-square distribution with df equal to the
    measurement dimension, so about (1 - confidence_level) of the samples exceed the quantile.
    Much more means the noise is underestimated, much less means it is overestimated.

    Args:
        nis_values (sequence of float): NIS samples of a single sensor
        df (int): measurement dimension
        confidence_level (float): quantile of the chi-square distribution

    Returns:
        float: ratio of samples above the quantile, nan for no samples
    """
    assert 0.0 < confidence_level < 1.0, "Confidence level must be in (0, 1)"
    nis_values = np.asarray(nis_values, dtype=float)
    if nis_values.size == 0:
        return float("nan")
    threshold = chi2.ppf(confidence_level, df=df)
    return float(np.mean(nis_values > threshold))

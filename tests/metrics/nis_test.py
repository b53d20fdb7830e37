import numpy as np
import pytest
from scipy.stats import chi2

from ukf_fusion.metrics import NIS_exceedance_ratio


def test_nis_exceedance_ratio():
    threshold = chi2.ppf(0.95, df=3)
    nis_values = [0.5, 1.0, threshold + 0.1, 2.0]
    assert NIS_exceedance_ratio(nis_values, df=3) == 0.25


def test_nis_exceedance_ratio_of_chi_square_samples():
    samples = np.random.RandomState(0).chisquare(df=2, size=20000)
    assert NIS_exceedance_ratio(samples, df=2) == pytest.approx(0.05, abs=0.01)


def test_nis_exceedance_ratio_empty():
    assert np.isnan(NIS_exceedance_ratio([], df=2))


def test_nis_exceedance_ratio_wrong_confidence_level():
    with pytest.raises(AssertionError):
        NIS_exceedance_ratio([1.0], df=2, confidence_level=1.5)

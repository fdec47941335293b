import pytest

from preexplorer import NoDataError, variance_stats
from preexplorer.stats import bounds


def test_variance_stats_standard_error():
    assert variance_stats([1, 3]) == pytest.approx((2.0, 1.0))
    assert variance_stats([2, 4, 6, 8]) == pytest.approx((5.0, (20 / 3 / 4) ** 0.5))


def test_single_sample_has_no_error():
    assert variance_stats([5]) == (5.0, 0.0)


def test_empty_sample():
    with pytest.raises(NoDataError):
        variance_stats([])
    with pytest.raises(NoDataError):
        bounds([])


def test_bounds():
    assert bounds([3, -1, 2]) == (-1.0, 3.0, 3)

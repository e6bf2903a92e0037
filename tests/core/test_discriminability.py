import numpy as np
import pytest

from discrim.core._discriminability import compute_discriminability


@pytest.mark.required
class TestComputeDiscriminability:
    """Tests the aggregation of reliability scores"""

    def test_remove_outliers(self):
        result = compute_discriminability([1.0, 0.0, 0.25, np.nan])
        assert result == {"discriminability": 0.625, "outliers": 1, "no_repeats": 1, "used": 2}

    def test_keep_outliers(self):
        result = compute_discriminability([1.0, 0.0, 0.5, np.nan], remove_outliers=False)
        assert result == {"discriminability": 0.5, "outliers": 0, "no_repeats": 1, "used": 3}

    def test_keep_outliers_ignores_threshold(self):
        result = compute_discriminability([1.0, 0.0, 0.5], remove_outliers=False, threshold=0.75)
        assert result["outliers"] == 0
        assert result["discriminability"] == 0.5

    def test_threshold(self):
        result = compute_discriminability([1.0, 0.5, 0.25, 0.75], threshold=0.5)
        assert result["discriminability"] == 0.875
        assert result["outliers"] == 2
        assert result["used"] == 2

    def test_threshold_is_exclusive(self):
        result = compute_discriminability([0.5, 0.5], threshold=0.5)
        assert np.isnan(result["discriminability"])
        assert result["outliers"] == 2

    @pytest.mark.parametrize(
        "scores",
        [
            [],
            [np.nan, np.nan],
            [0.0, 0.0, np.nan],
        ],
    )
    def test_empty_average_is_nan(self, scores):
        result = compute_discriminability(scores)
        assert np.isnan(result["discriminability"])
        assert result["used"] == 0

    def test_all_nan_counts(self):
        result = compute_discriminability([np.nan, np.nan, np.nan], remove_outliers=False)
        assert result["no_repeats"] == 3
        assert result["outliers"] == 0

    def test_counts_are_int(self):
        result = compute_discriminability(np.array([0.5, 0.0, np.nan]))
        assert all(isinstance(result[k], int) for k in ("outliers", "no_repeats", "used"))
        assert isinstance(result["discriminability"], float)

    def test_result_in_unit_interval(self, RNG):
        scores = RNG.random(100)
        result = compute_discriminability(scores, remove_outliers=False)
        assert 0.0 <= result["discriminability"] <= 1.0
        assert result["discriminability"] == pytest.approx(scores.mean())

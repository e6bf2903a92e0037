from __future__ import annotations

__all__ = []

import logging
from typing import TypedDict

import numpy as np

from discrim.types import Array1D
from discrim.utils._array import as_numpy

_logger = logging.getLogger(__name__)


class DiscriminabilityDict(TypedDict):
    """
    Type definition for discriminability output.

    Attributes
    ----------
    discriminability : float
        Mean of the retained reliability scores, NaN if none were retained
    outliers : int
        Number of scores at or below the threshold that were removed
    no_repeats : int
        Number of NaN scores, from scans without any comparison available
    used : int
        Number of scores averaged
    """

    discriminability: float
    outliers: int
    no_repeats: int
    used: int


def compute_discriminability(
    rdf: Array1D[float], remove_outliers: bool = True, threshold: float = 0.0
) -> DiscriminabilityDict:
    """
    Reduces reliability scores to a single discriminability score.

    Parameters
    ----------
    rdf : Array1D[float]
        Reliability scores, NaN entries are never averaged
    remove_outliers : bool, default True
        Whether to drop scores at or below `threshold`
    threshold : float, default 0.0
        Scores must be strictly greater than this to be kept when removing outliers

    Returns
    -------
    DiscriminabilityDict
        Dictionary with keys:
        - discriminability : float - Mean of the retained scores
        - outliers : int - Number of scores removed as outliers
        - no_repeats : int - Number of NaN scores
        - used : int - Number of scores averaged

    Examples
    --------
    >>> from discrim.core._discriminability import compute_discriminability
    >>> compute_discriminability([1.0, 0.0, 0.25, float("nan")])
    {'discriminability': 0.625, 'outliers': 1, 'no_repeats': 1, 'used': 2}
    """
    scores = as_numpy(rdf, dtype=np.float64).ravel()
    missing = np.isnan(scores)

    if remove_outliers:
        keep = ~missing & (scores > threshold)
        outliers = int(np.count_nonzero(~missing & ~keep))
    else:
        keep = ~missing
        outliers = 0

    used = int(np.count_nonzero(keep))
    value = float(np.mean(scores[keep])) if used else np.nan
    _logger.debug(f"Averaged {used} of {scores.size} scores ({outliers} outliers, {int(missing.sum())} missing).")

    return {
        "discriminability": value,
        "outliers": outliers,
        "no_repeats": int(np.count_nonzero(missing)),
        "used": used,
    }

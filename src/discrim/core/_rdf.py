from __future__ import annotations

__all__ = []

import logging
from collections.abc import Hashable
from typing import TypedDict

import numpy as np
from numpy.typing import NDArray

from discrim._log import LogMessage
from discrim.config import get_tie_tolerance
from discrim.types import Array1D, Array2D
from discrim.utils._array import encode_labels, ensure_distance_matrix

_logger = logging.getLogger(__name__)


class RDFDict(TypedDict):
    """
    Type definition for reliability density function output.

    Attributes
    ----------
    rdf : NDArray[np.float64]
        Reliability score of each repeated scan pair
    pairs : NDArray[np.intp]
        The (scan, partner) indices each score belongs to
    ids : list[Hashable]
        The subject id of each scored pair
    """

    rdf: NDArray[np.float64]
    pairs: NDArray[np.intp]
    ids: list[Hashable]


def _pair_score(others: NDArray[np.float64], target: float, tolerance: float) -> float:
    """Fraction of inter-subject distances the target distance beats, ties counted as half."""
    if others.size == 0 or np.isnan(target):
        return np.nan
    if tolerance:
        less = np.count_nonzero(others < target - tolerance)
        equal = np.count_nonzero(np.abs(others - target) <= tolerance)
    else:
        less = np.count_nonzero(others < target)
        equal = np.count_nonzero(others == target)
    return 1.0 - (less + 0.5 * equal) / others.size


def compute_rdf(distances: Array2D[float], ids: Array1D[Hashable], tie_tolerance: float | None = None) -> RDFDict:
    """
    Computes the reliability density function of a distance matrix.

    For every scan `i` and every other scan `j` of the same subject, the score is
    the fraction of distances from `i` to scans of other subjects that are larger
    than the distance from `i` to `j`, with tied distances counted as half. A score
    of 1.0 means `j` is closer to `i` than every scan of another subject.

    Scans whose subject has no other scan produce no score. Scans with no scans
    of other subjects to compare against score NaN, as do pairs whose same-subject
    distance is NaN.

    Parameters
    ----------
    distances : Array2D[float]
        Square (N, N) pairwise distance matrix, diagonal is ignored
    ids : Array1D[Hashable]
        Subject id of each of the N scans, compared by exact equality
    tie_tolerance : float or None, default None
        Absolute tolerance for counting two distances as tied, None uses the
        configured default (see :func:`discrim.config.set_tie_tolerance`)

    Returns
    -------
    RDFDict
        Dictionary with keys:
        - rdf : NDArray[np.float64] - Score of each repeated scan pair
        - pairs : NDArray[np.intp] - (P, 2) scan and partner indices of each score
        - ids : list - Subject id of each score

    Raises
    ------
    InvalidInputError
        If the distance matrix is not square or the number of ids does not match it

    Examples
    --------
    >>> from discrim.core._rdf import compute_rdf
    >>> dist = [[0, 1, 4, 4], [1, 0, 4, 4], [4, 4, 0, 1], [4, 4, 1, 0]]
    >>> compute_rdf(dist, ["a", "a", "b", "b"])["rdf"]
    array([1., 1., 1., 1.])
    """
    dist = ensure_distance_matrix(distances)
    codes, labels = encode_labels(ids, len(dist))
    tolerance = get_tie_tolerance(tie_tolerance)

    scores: list[float] = []
    pairs: list[tuple[int, int]] = []
    pair_ids: list[Hashable] = []

    for i, code in enumerate(codes):
        same = codes == code
        partners = np.flatnonzero(same)
        if len(partners) == 1:
            continue

        others = dist[i, ~same]
        for j in partners:
            if j == i:
                continue
            scores.append(_pair_score(others, dist[i, j], tolerance))
            pairs.append((i, int(j)))
            pair_ids.append(labels[code])

    _logger.log(
        logging.DEBUG,
        LogMessage(lambda: f"Scored {len(scores)} pairs from {len(dist)} scans of {len(labels)} subjects."),
    )

    return {
        "rdf": np.asarray(scores, dtype=np.float64),
        "pairs": np.asarray(pairs, dtype=np.intp).reshape(-1, 2),
        "ids": pair_ids,
    }

from __future__ import annotations

__all__ = []

import logging
from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import pdist, squareform

from discrim.exceptions import InvalidInputError
from discrim.types import ArrayND
from discrim.utils._array import as_numpy

_logger = logging.getLogger(__name__)


def pairwise_distances(
    features: ArrayND[float],
    metric: str | Callable[[NDArray[Any], NDArray[Any]], float] = "euclidean",
) -> NDArray[np.float64]:
    """
    Computes the symmetric pairwise distance matrix between scans.

    Each scan's features (for example a connectivity matrix) are flattened into a
    single vector before distances are computed.

    Parameters
    ----------
    features : ArrayND[float]
        Stack of per-scan features with shape (N, ...)
    metric : str or Callable, default "euclidean"
        Any metric accepted by :func:`scipy.spatial.distance.pdist`

    Returns
    -------
    NDArray[np.float64]
        The (N, N) distance matrix with a zero diagonal

    Raises
    ------
    InvalidInputError
        If no scans are provided

    Examples
    --------
    >>> from discrim.core._distance import pairwise_distances
    >>> pairwise_distances([[0.0, 0.0], [3.0, 4.0]])
    array([[0., 5.],
           [5., 0.]])
    """
    data = as_numpy(features, dtype=np.float64)
    if data.ndim == 0 or len(data) == 0:
        raise InvalidInputError("At least one scan is required to compute a distance matrix.")

    flat = data.reshape(len(data), -1)
    _logger.debug(f"Computing {metric} distances between {flat.shape[0]} scans of {flat.shape[1]} features.")
    return squareform(pdist(flat, metric=metric))

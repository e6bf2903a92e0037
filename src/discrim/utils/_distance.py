from __future__ import annotations

__all__ = []

from collections.abc import Callable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from discrim.core._distance import pairwise_distances
from discrim.types import ArrayND


def distance_matrix(
    features: ArrayND[float],
    metric: str | Callable[[NDArray[Any], NDArray[Any]], float] = "euclidean",
) -> NDArray[np.float64]:
    """
    Builds the pairwise distance matrix used by :func:`discrim.metrics.rdf`.

    Parameters
    ----------
    features : ArrayND[float]
        Stack of N per-scan features, such as N connectivity matrices of shape (R, R).
        Each scan is flattened before distances are computed.
    metric : str or Callable, default "euclidean"
        Any metric accepted by :func:`scipy.spatial.distance.pdist`

    Returns
    -------
    NDArray[np.float64]
        Symmetric (N, N) distance matrix

    Raises
    ------
    InvalidInputError
        If `features` is empty
    ValueError
        If `metric` is not recognized

    Examples
    --------
    >>> import numpy as np
    >>> from discrim.utils import distance_matrix

    >>> in_phase = np.array([[1.0, 1.0], [1.0, 1.0]])
    >>> out_of_phase = np.array([[1.0, -1.0], [-1.0, 1.0]])
    >>> distance_matrix([in_phase, out_of_phase, in_phase, out_of_phase], metric="cityblock")
    array([[0., 4., 0., 4.],
           [4., 0., 4., 0.],
           [0., 4., 0., 4.],
           [4., 0., 4., 0.]])
    """
    return pairwise_distances(features, metric)

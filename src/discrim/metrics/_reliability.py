"""
This module contains the implementation of the reliability density function
and the discriminability statistic for repeated measurements.
"""

from __future__ import annotations

__all__ = []

import logging
from collections.abc import Callable, Hashable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from discrim.core._discriminability import compute_discriminability
from discrim.core._distance import pairwise_distances
from discrim.core._rdf import compute_rdf
from discrim.outputs import DiscriminabilityOutput, DiscrStatOutput, RDFOutput
from discrim.outputs._base import set_metadata
from discrim.types import Array1D, Array2D, ArrayND
from discrim.utils._array import as_numpy, encode_labels

_logger = logging.getLogger(__name__)


def _report(result: dict[str, Any]) -> None:
    print(f"Ignoring {result['outliers']} outlier scores and {result['no_repeats']} scans without repeats.")
    print(f"Discriminability of {result['discriminability']:.4f} computed from {result['used']} scores.")


@set_metadata
def rdf(distances: Array2D[float], ids: Array1D[Hashable], tie_tolerance: float | None = None) -> RDFOutput:
    """
    Computes the reliability density function (RDF) of repeated measurements.

    Each repeated scan pair `(i, j)` of one subject is scored by the fraction of
    distances from scan `i` to scans of other subjects that exceed the distance
    between `i` and `j`, with exact ties counted as half.

    Parameters
    ----------
    distances : Array2D[float]
        Square (N, N) pairwise distance matrix between scans
    ids : Array1D[Hashable]
        Subject id of each scan. Scans are grouped by exact label equality.
    tie_tolerance : float or None, default None
        Absolute tolerance for treating two distances as tied, None uses
        :func:`discrim.config.get_tie_tolerance` (exact ties by default)

    Returns
    -------
    RDFOutput
        The reliability score, scan pair and subject id of every repeated scan pair

    Raises
    ------
    InvalidInputError
        If the distance matrix is not square or the number of ids does not match it

    Examples
    --------
    >>> from discrim.metrics import rdf
    >>> dist = [[0, 1, 2, 3], [1, 0, 3, 2], [2, 3, 0, 1], [3, 2, 1, 0]]
    >>> rdf(dist, [1, 1, 2, 2]).rdf
    array([1., 1., 1., 1.])
    """
    result = compute_rdf(distances, ids, tie_tolerance)
    return RDFOutput(**result)


@set_metadata
def discriminability(
    rdf: RDFOutput | Array1D[float],
    remove_outliers: bool = True,
    threshold: float = 0.0,
    verbose: bool = False,
) -> DiscriminabilityOutput:
    """
    Computes the discriminability of a dataset from its reliability scores.

    Parameters
    ----------
    rdf : RDFOutput or Array1D[float]
        Output of :func:`.rdf` or a sequence of reliability scores. NaN scores
        are never averaged.
    remove_outliers : bool, default True
        Whether to exclude scores at or below `threshold`
    threshold : float, default 0.0
        Scores must be strictly greater than this to be kept when removing outliers
    verbose : bool, default False
        Whether to print the number of excluded and used scores along with the result

    Returns
    -------
    DiscriminabilityOutput
        The discriminability along with the outlier, no-repeat and used counts

    Examples
    --------
    >>> from discrim.metrics import discriminability
    >>> discriminability([1.0, 0.0, 0.25, float("nan")])
    DiscriminabilityOutput(discriminability=0.625, outliers=1, no_repeats=1, used=2)

    >>> discriminability([1.0, 0.0, 0.25, float("nan")], remove_outliers=False)
    DiscriminabilityOutput(discriminability=0.4166666666666667, outliers=0, no_repeats=1, used=3)
    """
    scores = rdf.rdf if isinstance(rdf, RDFOutput) else rdf
    result = compute_discriminability(scores, remove_outliers, threshold)
    if verbose:
        _report(dict(result))
    return DiscriminabilityOutput(**result)


@set_metadata
def discr_stat(
    features: ArrayND[float],
    ids: Array1D[Hashable],
    metric: str | Callable[[NDArray[Any], NDArray[Any]], float] = "euclidean",
    remove_outliers: bool = True,
    threshold: float = 0.0,
    verbose: bool = False,
    tie_tolerance: float | None = None,
) -> DiscrStatOutput:
    """
    Computes the discriminability of a stack of per-scan features.

    Builds the pairwise distance matrix of the flattened features, scores every
    repeated scan pair with the reliability density function and averages the
    scores.

    Parameters
    ----------
    features : ArrayND[float]
        Stack of N per-scan features with shape (N, ...), such as connectivity matrices
    ids : Array1D[Hashable]
        Subject id of each scan
    metric : str or Callable, default "euclidean"
        Any metric accepted by :func:`scipy.spatial.distance.pdist`
    remove_outliers : bool, default True
        Whether to exclude scores at or below `threshold`
    threshold : float, default 0.0
        Scores must be strictly greater than this to be kept when removing outliers
    verbose : bool, default False
        Whether to print the number of excluded and used scores along with the result
    tie_tolerance : float or None, default None
        Absolute tolerance for treating two distances as tied

    Returns
    -------
    DiscrStatOutput
        The discriminability, reliability scores and score counts

    Raises
    ------
    InvalidInputError
        If `features` is empty or the number of ids does not match the number of scans

    Examples
    --------
    >>> import numpy as np
    >>> from discrim.metrics import discr_stat

    >>> in_phase = np.array([[1.0, 1.0], [1.0, 1.0]])
    >>> out_of_phase = np.array([[1.0, -1.0], [-1.0, 1.0]])
    >>> scans = np.stack([in_phase, out_of_phase, in_phase, out_of_phase])

    >>> discr_stat(scans, [1, 2, 1, 2]).discriminability
    1.0
    >>> discr_stat(scans, [1, 1, 2, 2]).discriminability
    0.25
    """
    data = as_numpy(features, dtype=np.float64)
    if data.ndim:
        encode_labels(ids, len(data))
    distances = pairwise_distances(data, metric)
    scores = compute_rdf(distances, ids, tie_tolerance)["rdf"]
    result = compute_discriminability(scores, remove_outliers, threshold)
    _logger.debug(f"discr_stat over {len(distances)} scans produced {len(scores)} scores.")
    if verbose:
        _report(dict(result))
    return DiscrStatOutput(
        discriminability=result["discriminability"],
        rdf=scores,
        outliers=result["outliers"],
        no_repeats=result["no_repeats"],
        used=result["used"],
    )

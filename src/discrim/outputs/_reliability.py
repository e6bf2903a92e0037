from __future__ import annotations

__all__ = []

from collections.abc import Hashable
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from discrim.outputs._base import Output


@dataclass(frozen=True)
class RDFOutput(Output):
    """
    Output class for :func:`.rdf` metric.

    Attributes
    ----------
    rdf : NDArray[np.float64]
        Reliability score of each repeated scan pair, in [0, 1] or NaN when the
        scan has no scan of another subject to compare against
    pairs : NDArray[np.intp]
        Array of shape (P, 2) holding the scan index and same-subject partner index of each score
    ids : list[Hashable]
        Subject id of each score
    """

    rdf: NDArray[np.float64]
    pairs: NDArray[np.intp]
    ids: list[Hashable]

    def __len__(self) -> int:
        return len(self.rdf)


@dataclass(frozen=True)
class DiscriminabilityOutput(Output):
    """
    Output class for :func:`.discriminability` metric.

    Attributes
    ----------
    discriminability : float
        Mean of the retained reliability scores, NaN when no score was retained
    outliers : int
        Number of scores at or below the threshold that were excluded
    no_repeats : int
        Number of NaN scores excluded
    used : int
        Number of scores averaged
    """

    discriminability: float
    outliers: int
    no_repeats: int
    used: int


@dataclass(frozen=True)
class DiscrStatOutput(Output):
    """
    Output class for :func:`.discr_stat` metric.

    Attributes
    ----------
    discriminability : float
        Discriminability of the dataset, NaN when no score was retained
    rdf : NDArray[np.float64]
        Reliability score of each repeated scan pair
    outliers : int
        Number of scores at or below the threshold that were excluded
    no_repeats : int
        Number of NaN scores excluded
    used : int
        Number of scores averaged
    """

    discriminability: float
    rdf: NDArray[np.float64]
    outliers: int
    no_repeats: int
    used: int

from __future__ import annotations

__all__ = []

import logging
from collections.abc import Hashable
from typing import Any, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from discrim._log import LogMessage
from discrim.exceptions import InvalidInputError
from discrim.types import SequenceLike

_logger = logging.getLogger(__name__)

_np_dtype = TypeVar("_np_dtype", bound=np.generic)


def as_numpy(
    array: ArrayLike | SequenceLike[Any],
    *,
    dtype: type[_np_dtype] | None = None,
    required_ndim: int | None = None,
) -> NDArray[_np_dtype]:
    """Converts an ArrayLike to Numpy array without copying (if possible)"""
    if isinstance(array, np.ndarray):
        _array = array.astype(dtype if dtype is not None else array.dtype, copy=False)
    else:
        _array = np.asarray(array, dtype=dtype)
        _logger.log(logging.DEBUG, LogMessage(lambda: f"Converted {array.__class__.__name__} -> {_array.shape}"))

    if required_ndim is not None and _array.ndim != required_ndim:
        raise ValueError(f"Array has {_array.ndim} dimensions, expected {required_ndim}.")

    return _array


def ensure_distance_matrix(distances: ArrayLike) -> NDArray[np.float64]:
    """
    Validates the distance matrix and converts it to a float64 array

    Parameters
    ----------
    distances : ArrayLike
        Pairwise distance matrix

    Returns
    -------
    NDArray[np.float64]
        Square distance matrix

    Raises
    ------
    InvalidInputError
        If the distance matrix is not a 2D square matrix
    """
    try:
        arr = as_numpy(distances, dtype=np.float64, required_ndim=2)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Distance matrix must be a 2D numeric array: {e}") from e

    if arr.shape[0] != arr.shape[1]:
        raise InvalidInputError(f"Expected a square distance matrix, but got shape {arr.shape}.")
    return arr


def encode_labels(ids: ArrayLike | SequenceLike[Hashable], n: int) -> tuple[NDArray[np.intp], list[Hashable]]:
    """
    Maps each subject label to an integer group code using exact equality

    Labels of different types never share a group, so `1`, `1.0`, `True` and `"1"`
    are four different subjects.

    Parameters
    ----------
    ids : ArrayLike or SequenceLike[Hashable]
        One label per scan
    n : int
        Expected number of labels

    Returns
    -------
    tuple[NDArray[np.intp], list[Hashable]]
        The group code for each scan and the label list ordered by first appearance

    Raises
    ------
    InvalidInputError
        If the labels are not a one dimensional sequence of hashable values or their count is not `n`
    """
    try:
        ndim = np.ndim(ids)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Subject ids must be a 1D sequence: {e}") from e
    if isinstance(ids, str | bytes) or ndim != 1:
        raise InvalidInputError(f"Expected a 1D sequence of subject ids, but got {ids.__class__.__name__}.")
    labels = ids.tolist() if isinstance(ids, np.ndarray) else list(ids)
    if len(labels) != n:
        raise InvalidInputError(f"Number of subject ids ({len(labels)}) does not match number of scans ({n}).")

    lookup: dict[tuple[type, Hashable], int] = {}
    try:
        codes = np.array([lookup.setdefault((type(label), label), len(lookup)) for label in labels], dtype=np.intp)
    except TypeError as e:
        raise InvalidInputError(f"Subject ids must be hashable: {e}") from e
    return codes, [label for _, label in lookup]

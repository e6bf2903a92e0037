"""Data types used in discrim."""

from __future__ import annotations

__all__ = [
    "Array",
    "Array1D",
    "Array2D",
    "ArrayND",
    "ArrayLike",
    "SequenceLike",
    "SubjectIds",
]

from collections.abc import Hashable, Iterator
from typing import Any, Protocol, TypeAlias, TypeVar, runtime_checkable

import numpy as np
from numpy.typing import NDArray

ArrayLike: TypeAlias = np.typing.ArrayLike
"""
Type alias for a `Union` representing objects that can be coerced into an array.

See Also
--------
`NumPy ArrayLike <https://numpy.org/doc/stable/reference/typing.html#numpy.typing.ArrayLike>`_
"""


@runtime_checkable
class Array(Protocol):
    """
    Protocol for array objects providing interoperability with discrim.

    Example
    -------
    >>> import numpy as np
    >>> from discrim.types import Array

    >>> isinstance(np.random.random((10, 10)), Array)
    True
    """

    @property
    def shape(self) -> tuple[int, ...]: ...
    def __array__(self) -> NDArray[Any]: ...
    def __getitem__(self, key: Any, /) -> Any: ...
    def __iter__(self) -> Iterator[Any]: ...
    def __len__(self) -> int: ...


DType = TypeVar("DType", covariant=True)


@runtime_checkable
class SequenceLike(Protocol[DType]):
    """Protocol for sequence-like objects that can be indexed and iterated."""

    def __getitem__(self, key: Any, /) -> Any: ...
    def __iter__(self) -> Iterator[DType]: ...
    def __len__(self) -> int: ...


Array1D: TypeAlias = Array | SequenceLike[DType]
Array2D: TypeAlias = Array | SequenceLike[Array1D[DType]]
ArrayND: TypeAlias = Array | Array1D[DType] | Array2D[DType] | SequenceLike[Array2D[DType]]

SubjectIds: TypeAlias = Array1D[Hashable]
"""One subject label per scan. Scans sharing a label are repeated measurements of one subject."""

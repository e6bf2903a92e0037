"""Exception classes for discrim."""

__all__ = [
    "InvalidInputError",
]


class InvalidInputError(ValueError):
    """Raised when inputs cannot be interpreted before any computation starts.

    Examples are a distance matrix that is not square, a label sequence whose
    length differs from the number of scans, or an empty feature stack.
    """

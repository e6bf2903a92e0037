"""
Global configuration settings for discrim.
"""

from __future__ import annotations

__all__ = ["get_tie_tolerance", "set_tie_tolerance", "use_tie_tolerance"]

from typing import Any

### GLOBALS ###

_tie_tolerance: float = 0.0

### FUNCS ###


def _validate_tolerance(tolerance: float) -> float:
    tolerance = float(tolerance)
    if not tolerance >= 0.0:
        raise ValueError(f"tie_tolerance must be a non-negative number, got {tolerance}.")
    return tolerance


def set_tie_tolerance(tolerance: float | None) -> None:
    """
    Sets the default absolute tolerance used to detect tied distances when computing
    the reliability density function.

    Parameters
    ----------
    tolerance : float or None
        Distances within `tolerance` of the same-subject distance count as ties.
        None resets to the default of 0.0, which only counts exactly equal distances.

    Raises
    ------
    ValueError
        If `tolerance` is negative or NaN.
    """
    global _tie_tolerance
    _tie_tolerance = 0.0 if tolerance is None else _validate_tolerance(tolerance)


def get_tie_tolerance(override: float | None = None) -> float:
    """
    Returns the tie tolerance to use.

    Parameters
    ----------
    override : float or None, default None
        The user specified override if provided, otherwise returns the default tolerance.

    Returns
    -------
    float

    Raises
    ------
    ValueError
        If `override` is negative or NaN.
    """
    if override is None:
        global _tie_tolerance
        return _tie_tolerance
    return _validate_tolerance(override)


class TieToleranceContextManager:
    def __init__(self, tolerance: float) -> None:
        self._tolerance = tolerance

    def __enter__(self) -> None:
        global _tie_tolerance
        self._old = _tie_tolerance
        set_tie_tolerance(self._tolerance)

    def __exit__(self, *args: tuple[Any, ...]) -> None:
        global _tie_tolerance
        _tie_tolerance = self._old


def use_tie_tolerance(tolerance: float) -> TieToleranceContextManager:
    return TieToleranceContextManager(tolerance)

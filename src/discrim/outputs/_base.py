from __future__ import annotations

__all__ = []

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import numpy as np

from discrim import __version__


@dataclass(frozen=True)
class ExecutionMetadata:
    """
    Metadata about the execution of the metric that produced an Output.

    Attributes
    ----------
    name: str
        Fully qualified name of the metric
    execution_time: datetime
        Time of execution
    execution_duration: float
        Duration of execution in seconds
    arguments: dict[str, Any]
        Arguments passed to the metric, arrays summarized by their shape
    version: str
        Version of discrim
    """

    name: str
    execution_time: datetime
    execution_duration: float
    arguments: dict[str, Any]
    version: str

    @classmethod
    def empty(cls) -> ExecutionMetadata:
        return ExecutionMetadata(
            name="",
            execution_time=datetime.min,
            execution_duration=0.0,
            arguments={},
            version=__version__,
        )


class Output:
    _meta: ExecutionMetadata | None = None

    def data(self) -> dict[str, Any]:
        """
        The output data as a dictionary.

        Returns
        -------
        dict[str, Any]
        """
        return {k: v for k, v in self.__dict__.items() if k != "_meta"}

    def meta(self) -> ExecutionMetadata:
        """
        Metadata about the execution of the metric that produced this output.

        Returns
        -------
        ExecutionMetadata
        """
        return self._meta or ExecutionMetadata.empty()

    def __str__(self) -> str:
        return str(self.data())


P = ParamSpec("P")
R = TypeVar("R", bound=Output)


def _fmt(v: Any) -> Any:
    if np.isscalar(v):
        return v
    if hasattr(v, "shape"):
        return f"{v.__class__.__name__}: shape={getattr(v, 'shape')}"
    if hasattr(v, "__len__"):
        return f"{v.__class__.__name__}: len={len(v)}"
    return f"{v.__class__.__name__}"


def set_metadata(fn: Callable[P, R]) -> Callable[P, R]:
    """Decorator to stamp Output classes with runtime metadata"""
    fn_params = inspect.signature(fn).parameters
    module = fn.__module__.removeprefix("src.")
    name = f"{module}.{fn.__name__}"
    _logger = logging.getLogger(module)

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        # defaults first, then positional and keyword arguments
        arguments = {k: None if v.default is inspect.Parameter.empty else v.default for k, v in fn_params.items()}
        arguments.update(zip(fn_params, args))
        arguments.update(kwargs)
        arguments = {k: _fmt(v) for k, v in arguments.items()}

        time = datetime.now(timezone.utc)
        _logger.log(logging.INFO, f">>> Executing '{name}': args={arguments} <<<")

        result = fn(*args, **kwargs)

        duration = (datetime.now(timezone.utc) - time).total_seconds()
        _logger.log(logging.INFO, f">>> Completed '{name}': args={arguments} duration={duration} <<<")

        object.__setattr__(result, "_meta", ExecutionMetadata(name, time, duration, arguments, __version__))
        return result

    return wrapper

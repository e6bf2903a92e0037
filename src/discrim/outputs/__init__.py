"""
Output classes for discrim to store function outputs
as well as runtime metadata for reproducibility and logging.
"""

from ._base import ExecutionMetadata
from ._reliability import DiscriminabilityOutput, DiscrStatOutput, RDFOutput

__all__ = [
    "DiscriminabilityOutput",
    "DiscrStatOutput",
    "ExecutionMetadata",
    "RDFOutput",
]

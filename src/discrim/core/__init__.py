"""
Core stateless functions for computing reliability scores and discriminability.
"""

__all__ = [
    "compute_discriminability",
    "compute_rdf",
    "pairwise_distances",
]

from discrim.core._discriminability import compute_discriminability
from discrim.core._distance import pairwise_distances
from discrim.core._rdf import compute_rdf

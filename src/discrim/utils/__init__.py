"""
The utility functions are provided by discrim to assist users in preparing \
per-scan features for discriminability metrics.
"""

from discrim.utils._distance import distance_matrix

__all__ = ["distance_matrix"]

"""
Metrics measure how reliably repeated measurements of a subject can be \
distinguished from measurements of other subjects.
"""

__all__ = [
    "discr_stat",
    "discriminability",
    "rdf",
    "DiscrStatOutput",
    "DiscriminabilityOutput",
    "RDFOutput",
]

from discrim.metrics._reliability import discr_stat, discriminability, rdf
from discrim.outputs._reliability import DiscriminabilityOutput, DiscrStatOutput, RDFOutput

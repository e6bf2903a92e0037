from __future__ import annotations

import numpy as np
import pytest

import discrim.config as config

IN_PHASE = np.array([[1.0, 1.0], [1.0, 1.0]])
OUT_OF_PHASE = np.array([[1.0, -1.0], [-1.0, 1.0]])


@pytest.fixture(autouse=True)
def reset_tie_tolerance():
    yield
    config.set_tie_tolerance(None)


@pytest.fixture(scope="session")
def RNG():
    return np.random.default_rng(0)


@pytest.fixture
def phase_scans():
    """Two scans each of an in-phase and an out-of-phase 2x2 correlation matrix."""
    return np.stack([IN_PHASE, OUT_OF_PHASE, IN_PHASE, OUT_OF_PHASE])


@pytest.fixture
def clustered_distances(RNG):
    """Distances for 5 subjects with 3 scans each, where scans of a subject sit close together."""
    centers = RNG.normal(scale=10.0, size=(5, 8))
    features = np.repeat(centers, 3, axis=0) + RNG.normal(scale=0.01, size=(15, 8))
    ids = np.repeat(np.arange(5), 3)
    diff = features[:, None, :] - features[None, :, :]
    return np.sqrt((diff**2).sum(-1)), ids

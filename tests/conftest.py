import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from pitch_curator.config import DefectConfig, PitchConfig, SimConfig


@pytest.fixture
def small_config():
    """20 x 8 cell strip: one sweep row whose footprints span the full width."""
    return SimConfig(
        pitch=PitchConfig(length_cm=100, width_cm=40, cm_per_cell=5, noise_amplitude=0.05),
        defects=DefectConfig(count_range=(0, 0)),
        margin=4,
        seed=11,
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)

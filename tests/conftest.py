import numpy as np
import pytest


@pytest.fixture
def noise_frame():
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(480, 640, 3), dtype=np.uint8)

import numpy as np
import pytest

from rubik.core.shuffle import UniformMoveSampler
from rubik.core.state import FaceletCube


@pytest.fixture
def solved():
    return FaceletCube()


@pytest.fixture
def scrambled():
    cube = FaceletCube()
    cube.random_shuffle(25, UniformMoveSampler(seed=7))
    return cube


@pytest.fixture
def sticker_ids():
    """54 distinct values so every sticker can be traced through a turn."""
    return np.arange(54, dtype=np.int32).reshape(6, 3, 3)

import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def sample_array():
    return [170, 45, 75, 90, 802, 24, 2, 66]


@pytest.fixture
def sorted_sample_array():
    return [2, 24, 45, 66, 75, 90, 170, 802]

import matplotlib

matplotlib.use("Agg")

import pytest

import constants as const
from grid_core import new_grid


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    """Keep progress prints out of the test output."""
    monkeypatch.setattr(const, "VERBOSE", False)


@pytest.fixture
def open_square():
    """2x2 grid with every inner wall removed (contains a loop)."""
    grid = new_grid(2, 2)
    grid.carve_passage((0, 0), (1, 0))
    grid.carve_passage((0, 0), (0, 1))
    grid.carve_passage((1, 0), (1, 1))
    grid.carve_passage((0, 1), (1, 1))
    return grid

import os

import pytest

from mapping.grid import Grid


PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
PARAMS_PATH = os.path.join(PROJECT_ROOT, 'config', 'params.yaml')


def open_grid(width, height, start, destination):
    rows = [[' '] * width for _ in range(height)]
    rows[start[1]][start[0]] = 'S'
    rows[destination[1]][destination[0]] = 'D'
    return Grid.from_rows([''.join(row) for row in rows])


def assert_valid_path(grid, path):
    coords = path.coordinates()
    assert coords[0] == grid.start, "path should begin at the start"
    assert coords[-1] == grid.destination, "path should end at the destination"
    for x, y in coords:
        assert not grid.is_obstacle(x, y), f"path crosses obstacle at {(x, y)}"
    for (x1, y1), (x2, y2) in zip(coords, coords[1:]):
        assert max(abs(x1 - x2), abs(y1 - y2)) == 1, "path steps must be 8-connected"


@pytest.fixture
def params_path():
    return PARAMS_PATH


@pytest.fixture
def maze():
    return Grid.from_rows([
        "S         ",
        "   ##     ",
        "   ##  #  ",
        "   ##  #  ",
        "       # D",
        "          ",
    ])


@pytest.fixture
def corridor():
    return Grid.from_rows([
        "#######",
        "S     D",
        "#######",
    ])

"""
Obstacle layer for the objective costs.

Detects cells that hug a wall, i.e. have an obstacle directly
above, below, left or right of them. Cells past the grid border
are not walls.
"""

import numpy as np

from mapping.grid import CellKind


class ObstacleLayer:
    def __init__(self, grid):
        self.grid = grid
        self._mask = None

    def compute(self):
        """
        Compute the wall-hugging mask for the whole grid.

        Returns:
            mask: (height, width) boolean array, True where a cell hugs a wall
        """
        obstacles = self.grid.cells == CellKind.OBSTACLE
        padded = np.pad(obstacles, 1, constant_values=False)
        mask = (padded[:-2, 1:-1] | padded[2:, 1:-1] |
                padded[1:-1, :-2] | padded[1:-1, 2:])
        self._mask = mask
        return mask

    def hugs_wall(self, x, y):
        """Check if any in-bounds orthogonal neighbour of (x, y) is an obstacle"""
        if self._mask is None:
            self.compute()
        return bool(self._mask[y, x])

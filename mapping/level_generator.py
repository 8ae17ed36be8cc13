"""
Random world generation.

Lays out:
- Start (given, or random away from the border)
- Destination (random, far enough from the start)
- Randomly deposited obstacles
"""

import numpy as np
from typing import Optional, Tuple

from mapping.grid import Grid, CellKind


INSET = 1
BARRIER_FACTOR = 0.45
MIN_SEPARATION = 0.25


class LevelGenerator:
    def __init__(self, width, height, seed=None, barrier_factor=BARRIER_FACTOR):
        if width <= 0 or height <= 0:
            raise ValueError(f"world size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.seed = seed
        self.barrier_factor = barrier_factor
        self.rng = np.random.default_rng(seed)

        # Destination must be strictly further than this from the start on both axes
        self.min_x_dist = int(MIN_SEPARATION * width)
        self.min_y_dist = int(MIN_SEPARATION * height)

        self.grid = Grid(np.full((height, width), CellKind.FREE, dtype=np.int8), (0, 0), (0, 0))

    def _inset(self, x, y):
        return INSET < x < self.width - INSET and INSET < y < self.height - INSET

    def _choose(self, candidates, what):
        if not candidates:
            raise ValueError(f"no valid {what} cell in a {self.width}x{self.height} world")
        return candidates[int(self.rng.integers(len(candidates)))]

    def layout_start(self) -> Tuple[int, int]:
        candidates = [(x, y)
                      for y in range(self.height)
                      for x in range(self.width)
                      if self._inset(x, y)]
        return self._choose(candidates, 'start')

    def layout_dest(self, start: Tuple[int, int]) -> Tuple[int, int]:
        sx, sy = start
        candidates = [(x, y)
                      for y in range(self.height)
                      for x in range(self.width)
                      if self._inset(x, y)
                      and abs(x - sx) > self.min_x_dist
                      and abs(y - sy) > self.min_y_dist]
        return self._choose(candidates, 'destination')

    def layout_obstacles(self):
        """Randomly deposit obstacles, never on the start or destination"""
        num_barriers = int(self.width * self.height * self.barrier_factor + 0.5)
        xs = self.rng.integers(self.width, size=num_barriers)
        ys = self.rng.integers(self.height, size=num_barriers)

        for x, y in zip(xs, ys):
            x, y = int(x), int(y)
            if (x, y) == self.grid.start or (x, y) == self.grid.destination:
                continue
            self.grid.set(x, y, CellKind.OBSTACLE)

    def layout(self, start: Optional[Tuple[int, int]] = None) -> Grid:
        """
        Lay out a fresh world.

        Args:
            start: Optional start coordinate (x, y); random if None

        Returns:
            grid: The generated world
        """
        self.grid.cells.fill(CellKind.FREE)

        if start is None:
            start = self.layout_start()
        elif not self.grid.in_bounds(*start):
            raise ValueError(f"start {start} is outside the world")
        dest = self.layout_dest(start)

        self.grid.start = tuple(start)
        self.grid.destination = dest
        self.grid.set(*self.grid.start, CellKind.START)
        self.grid.set(*dest, CellKind.DESTINATION)

        self.layout_obstacles()
        return self.grid


"""
Tile grid for path finding.

Stores:
- Cell kind per tile (free, obstacle, start, destination, step)
- Start and destination coordinates

Maps are indexed row-major, cells[y, x], with y growing downward.
"""

import numpy as np
from enum import IntEnum
from typing import List, Tuple


class MapFormatError(ValueError):
    """Raised when a tile map file cannot be parsed."""


class CellKind(IntEnum):
    FREE = 0
    OBSTACLE = 1
    START = 2
    DESTINATION = 3
    STEP = 4

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'CellKind':
        for kind, sym in SYMBOLS.items():
            if sym == symbol:
                return kind
        raise MapFormatError(f"unknown map symbol {symbol!r}")


SYMBOLS = {
    CellKind.FREE: ' ',
    CellKind.OBSTACLE: '#',
    CellKind.START: 'S',
    CellKind.DESTINATION: 'D',
    CellKind.STEP: '+',
}

SYMBOL_BUG = '?'
ENCODING = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def encode(index: int) -> str:
    """Encode a row/column index as a single base-62 digit ('?' past 61)"""
    if index < 0:
        raise ValueError(f"index {index} cannot be encoded")
    if index >= len(ENCODING):
        return SYMBOL_BUG
    return ENCODING[index]


class Grid:
    """
    Rectangular tile map with one start and one destination.

    Attributes:
        cells (np.ndarray): (height, width) array of CellKind values
        start (Tuple[int, int]): Start coordinate (x, y)
        destination (Tuple[int, int]): Destination coordinate (x, y)
    """

    def __init__(self, cells, start: Tuple[int, int], destination: Tuple[int, int]):
        self.cells = np.asarray(cells, dtype=np.int8)
        if self.cells.ndim != 2:
            raise ValueError("grid cells must be a 2D array")
        self.start = tuple(start)
        self.destination = tuple(destination)

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind(self, x: int, y: int) -> CellKind:
        return CellKind(int(self.cells[y, x]))

    def is_obstacle(self, x: int, y: int) -> bool:
        """Check if in-bounds cell (x, y) is an obstacle"""
        return bool(self.cells[y, x] == CellKind.OBSTACLE)

    def set(self, x: int, y: int, kind: CellKind):
        self.cells[y, x] = kind

    def walk(self, path):
        """Mark the steps of a path on the grid, leaving start and destination"""
        for node in path:
            if (node.x, node.y) in (self.start, self.destination):
                continue
            self.set(node.x, node.y, CellKind.STEP)

    def copy(self) -> 'Grid':
        return Grid(self.cells.copy(), self.start, self.destination)

    def to_rows(self) -> List[str]:
        """Convert the grid back to rows of map symbols"""
        return [''.join(CellKind(int(c)).symbol for c in row) for row in self.cells]

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Grid':
        """
        Build a grid from rows of map symbols.

        Args:
            rows: Equal-length strings using ' ', '#', 'S', 'D', '+'

        Returns:
            grid: Grid with start and destination taken from 'S' and 'D'
        """
        if not rows:
            raise MapFormatError("map has no rows")
        width = len(rows[0])
        cells = np.zeros((len(rows), width), dtype=np.int8)
        start = None
        destination = None

        for y, row in enumerate(rows):
            if len(row) != width:
                raise MapFormatError(f"bad row width at row {y}: {len(row)} != {width}")
            for x, sym in enumerate(row):
                kind = CellKind.from_symbol(sym)
                cells[y, x] = kind
                if kind == CellKind.START:
                    start = (x, y)
                elif kind == CellKind.DESTINATION:
                    destination = (x, y)

        if start is None or destination is None:
            raise MapFormatError("map needs both a start 'S' and a destination 'D'")
        return cls(cells, start, destination)

    @classmethod
    def load(cls, filepath: str) -> 'Grid':
        """
        Load a tile map file.

        The first line holds "width height", followed by height rows
        of exactly width symbols each.
        """
        with open(filepath, 'r') as f:
            lines = f.read().splitlines()

        if not lines:
            raise MapFormatError(f"{filepath} is empty")
        try:
            width, height = (int(tok) for tok in lines[0].split())
        except ValueError:
            raise MapFormatError(f"bad dimensions line in {filepath}: {lines[0]!r}")

        rows = lines[1:1 + height]
        if len(rows) != height:
            raise MapFormatError(f"{filepath} has {len(rows)} rows, expected {height}")
        grid = cls.from_rows(rows)
        if grid.width != width:
            raise MapFormatError(f"bad row width in {filepath}: {grid.width} != {width}")
        return grid

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, start={self.start}, destination={self.destination})"

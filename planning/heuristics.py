"""
Distance heuristics for A*.

- Euclidean: straight-line distance
- Manhattan: |dx| + |dy|
- Checkers: max(|dx|, |dy|), admissible for 8-connected unit steps
- SSE: dx^2 + dy^2, deliberately over-estimating
"""

import math
from enum import Enum

from planning.errors import ConfigurationError


class Heuristic(Enum):
    EUCLIDEAN = 'euclidean'
    MANHATTAN = 'manhattan'
    CHECKERS = 'checkers'
    SSE = 'sse'

    @classmethod
    def parse(cls, value) -> 'Heuristic':
        """Accept a Heuristic or its (case-insensitive) name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ', '.join(h.value for h in cls)
            raise ConfigurationError(f"bad heuristic {value!r}, expected one of: {names}")

    def evaluate(self, a, b) -> float:
        """
        Estimate the remaining distance between two coordinates.

        Args:
            a: Coordinate (x, y)
            b: Coordinate (x, y)

        Returns:
            h: Non-negative estimate
        """
        dx = float(a[0] - b[0])
        dy = float(a[1] - b[1])
        return _METRICS[self](dx, dy)


def checkers(dx, dy):
    return max(abs(dx), abs(dy))


def sse(dx, dy):
    return dx * dx + dy * dy


def manhattan(dx, dy):
    return abs(dx) + abs(dy)


def euclidean(dx, dy):
    return math.sqrt(sse(dx, dy))


_METRICS = {
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.MANHATTAN: manhattan,
    Heuristic.CHECKERS: checkers,
    Heuristic.SSE: sse,
}

"""
Open and closed sets for A*.

The open set is a heap keyed by (cost, generation id). Ids grow in
insertion order, so among equal-cost nodes the first inserted is
popped first.
"""

import heapq
from typing import List, Set, Tuple

from planning.node import Node


class Frontier:
    def __init__(self):
        self._heap: List[Tuple[float, int, Node]] = []
        self._positions: Set[Tuple[int, int]] = set()

    def push(self, node: Node):
        heapq.heappush(self._heap, (node.cost, node.id, node))
        self._positions.add(node.position)

    def pop(self) -> Node:
        """Remove and return the lowest-cost node"""
        _, _, node = heapq.heappop(self._heap)
        self._positions.discard(node.position)
        return node

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self._positions

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)


class Visited:
    def __init__(self):
        self._positions: Set[Tuple[int, int]] = set()

    def add(self, node: Node):
        self._positions.add(node.position)

    def contains(self, x: int, y: int) -> bool:
        return (x, y) in self._positions

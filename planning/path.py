"""
Path reconstruction.

Turns the backward parent chain of the destination node into a path
that can be walked forward from the start via child links.
"""

from typing import Iterator, List, Optional, Tuple

from mapping.grid import encode
from planning.node import Node, NodeArena


class Path:
    """
    Forward-traversable path ending at a terminal node.

    Attributes:
        arena (NodeArena): Arena owning the nodes of the search
        terminal (Node): Destination node the path was built from
        start (Node): First node of the path
    """

    def __init__(self, arena: NodeArena, terminal: Node):
        self.arena = arena
        self.terminal = terminal
        self.start, self._length = self._relink()

    def _relink(self):
        # Child links are rebuilt from the parent chain, destination first
        node = self.terminal
        child = None
        length = 0
        while True:
            node.child = child
            length += 1
            child = node.id
            parent = self.arena.parent_of(node)
            if parent is None:
                return node, length
            node = parent

    @property
    def cost(self) -> float:
        return self.terminal.cost

    def __len__(self):
        return self._length

    def __iter__(self) -> Iterator[Node]:
        node = self.start
        while node is not None:
            yield node
            node = self.arena.child_of(node)

    def coordinates(self) -> List[Tuple[int, int]]:
        return [node.position for node in self]

    def node_at(self, x: int, y: int) -> Optional[Node]:
        """Get the node at (x, y) if it lies on the path"""
        for node in self:
            if node.x == x and node.y == y:
                return node
        return None

    def __str__(self):
        parts = []
        node = self.terminal
        while node is not None:
            parts.append(f"[{encode(node.x)},{encode(node.y)}]")
            node = self.arena.parent_of(node)
        return ' <- '.join(parts)

    def __repr__(self):
        return f"Path(length={len(self)}, cost={self.cost:.3f})"

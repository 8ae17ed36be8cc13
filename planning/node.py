"""
Search nodes for A*.

Nodes live in a per-search arena and refer to each other by index,
so parent/child links never form reference cycles.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass
class Node:
    id: int
    x: int
    y: int
    cost: float = float('inf')
    steps: int = 0
    parent: Optional[int] = None
    child: Optional[int] = None
    inertia: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class NodeArena:
    """
    Owns every node generated during one search.

    The generation id of a node is its index in the arena, so the
    arena size is the number of nodes generated so far.
    """

    def __init__(self):
        self.nodes: List[Node] = []

    def create(self, x: int, y: int, parent: Optional[int] = None) -> Node:
        node = Node(id=len(self.nodes), x=x, y=y, parent=parent)
        if parent is not None:
            node.steps = self.nodes[parent].steps + 1
        self.nodes.append(node)
        return node

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def child_of(self, node: Node) -> Optional[Node]:
        if node.child is None:
            return None
        return self.nodes[node.child]

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __len__(self):
        return len(self.nodes)

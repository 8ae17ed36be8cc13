"""
A* path planner with objective-shaped costs.

Plans paths on an 8-connected tile grid that:
- Avoid obstacles
- Follow a selectable distance heuristic
- Optionally hug walls (stealthy) or favour straight runs (pretty)

Every move costs one step, diagonal or not.
"""

from dataclasses import dataclass
from typing import Optional

from costmap.objectives import Objective, make_cost_model
from planning.frontier import Frontier, Visited
from planning.heuristics import Heuristic
from planning.node import NodeArena
from planning.path import Path


@dataclass
class SearchResult:
    path: Optional[Path]
    node_count: int
    objective: Objective
    heuristic: Heuristic

    @property
    def found(self) -> bool:
        return self.path is not None


class AStarPlanner:
    def __init__(self, grid, config=None):
        config = config or {}
        self.grid = grid
        self.config = config
        self.heuristic = Heuristic.parse(config.get('heuristic', Heuristic.EUCLIDEAN))
        self.node_limit = config.get('node_limit')
        self.objective_weights = config.get('objectives', {})
        self.verbose = config.get('verbose', False)

        # 8-connected grid movements: W, NW, N, NE, E, SE, S, SW
        self.movements = [
            (-1, 0), (-1, -1), (0, -1), (1, -1),
            (1, 0), (1, 1), (0, 1), (-1, 1)
        ]

    def find(self, objective=Objective.BASIC, limit=None) -> SearchResult:
        """
        Find a path from the grid's start to its destination.

        Args:
            objective: Objective, its name, or a cost model instance
            limit: Maximum number of nodes to generate; falls back to the
                configured node_limit, unbounded if neither is set

        Returns:
            result: SearchResult whose path is None when no path was found
        """
        if isinstance(objective, (Objective, str)):
            cost_model = make_cost_model(objective, self.objective_weights)
        else:
            cost_model = objective
        cost_model = cost_model.bind(self.grid)

        if limit is None:
            limit = self.node_limit

        arena = NodeArena()
        path = self._astar(arena, cost_model, limit)
        result = SearchResult(path, len(arena), cost_model.objective, self.heuristic)

        if self.verbose:
            if path is not None:
                print(f"[Planner] Path found with {len(path)} nodes "
                      f"({len(arena)} generated, {cost_model.objective.value})")
            else:
                print(f"[Planner] No path found ({len(arena)} generated, "
                      f"{cost_model.objective.value})")
        return result

    def _astar(self, arena, cost_model, limit):
        """A* search algorithm"""
        dest = self.grid.destination
        frontier = Frontier()
        visited = Visited()

        start = arena.create(*self.grid.start)
        start.cost = self._heuristic(start.position, dest)
        frontier.push(start)

        while frontier:
            node = frontier.pop()

            if node.position == dest:
                return self._reconstruct_path(arena, node)

            visited.add(node)

            for dx, dy in self.movements:
                x, y = node.x + dx, node.y + dy

                if not self.grid.in_bounds(x, y):
                    continue
                # First discovery wins; no cost relaxation
                if frontier.contains(x, y) or visited.contains(x, y):
                    continue
                if self.grid.is_obstacle(x, y):
                    continue

                adj = arena.create(x, y, parent=node.id)
                h = self._heuristic(adj.position, dest)
                adj.cost = adj.steps + h + cost_model.surcharge(arena, node, adj, h)
                frontier.push(adj)

                if limit is not None and len(arena) > limit:
                    return None

        return None

    def _heuristic(self, pos, goal):
        return self.heuristic.evaluate(pos, goal)

    def _reconstruct_path(self, arena, node):
        """Reconstruct path from goal node"""
        return Path(arena, node)

"""
Objective costs layered on top of standard A*.

Objectives:
- Basic: plain A*, no surcharge
- Stealthy: discount cells hugging a wall so the route sticks to cover
- Pretty: reward straight runs and penalize zig-zags near walls

Stealthy and Pretty trade optimality for path shape; their paths
need not be shortest.
"""

import copy
from enum import Enum

from costmap.obstacle_layer import ObstacleLayer
from planning.errors import ConfigurationError


class Objective(Enum):
    BASIC = 'basic'
    PRETTY = 'pretty'
    STEALTHY = 'stealthy'

    @classmethod
    def parse(cls, value) -> 'Objective':
        """Accept an Objective or its (case-insensitive) name"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ', '.join(o.value for o in cls)
            raise ConfigurationError(f"bad objective {value!r}, expected one of: {names}")


class BasicCost:
    objective = Objective.BASIC

    def bind(self, grid):
        return self

    def surcharge(self, arena, node, adj, heuristic):
        return 0.0


class StealthyCost:
    objective = Objective.STEALTHY

    def __init__(self, wall_discount=0.10):
        self.wall_discount = wall_discount
        self.obstacles = None

    def bind(self, grid):
        bound = copy.copy(self)
        bound.obstacles = ObstacleLayer(grid)
        return bound

    def surcharge(self, arena, node, adj, heuristic):
        # No discount while expanding the start node
        if node.parent is None:
            return 0.0
        if self.obstacles.hugs_wall(adj.x, adj.y):
            return -heuristic * self.wall_discount
        return 0.0


class PrettyCost:
    objective = Objective.PRETTY

    def __init__(self, straight_wall=10.0, zag=2.0, wall_zag=13.0, inertia_limit=8):
        self.straight_wall = straight_wall
        self.zag = zag
        self.wall_zag = wall_zag
        self.inertia_limit = inertia_limit
        self.obstacles = None

    def bind(self, grid):
        bound = copy.copy(self)
        bound.obstacles = ObstacleLayer(grid)
        return bound

    def surcharge(self, arena, node, adj, heuristic):
        """
        Surcharge for moving from node to adj.

        Sets adj.inertia as a side effect: one more than node's inertia
        when the move continues node's direction.
        """
        parent = arena.parent_of(node)
        if parent is None:
            return 0.0

        prev_move = (node.x - parent.x, node.y - parent.y)
        move = (adj.x - node.x, adj.y - node.y)
        zags = prev_move != move

        if not zags:
            adj.inertia = node.inertia + 1

        # A long enough straight run is left alone
        if adj.inertia >= self.inertia_limit:
            return 0.0

        hugs = self.obstacles.hugs_wall(adj.x, adj.y)
        if hugs and not zags:
            return float(self.straight_wall)
        if not hugs and zags:
            return float(self.zag)
        if hugs and zags:
            return float(self.wall_zag)
        return 0.0


COST_MODELS = {
    Objective.BASIC: BasicCost,
    Objective.STEALTHY: StealthyCost,
    Objective.PRETTY: PrettyCost,
}


def make_cost_model(objective, weights=None):
    """
    Build the cost model for an objective.

    Args:
        objective: Objective or its name
        weights: Optional {objective name: {param: value}} overrides

    Returns:
        model: Unbound cost model; call bind(grid) before searching
    """
    objective = Objective.parse(objective)
    params = dict((weights or {}).get(objective.value) or {})
    try:
        return COST_MODELS[objective](**params)
    except TypeError:
        raise ConfigurationError(f"bad parameters for {objective.value} objective: {sorted(params)}")

import pytest

from costmap.objectives import (BasicCost, Objective, PrettyCost, StealthyCost,
                                make_cost_model)
from costmap.obstacle_layer import ObstacleLayer
from mapping.grid import Grid
from planning.errors import ConfigurationError
from planning.node import NodeArena


@pytest.fixture
def walled():
    # Single obstacle at (2, 1)
    return Grid.from_rows([
        "     ",
        "  #  ",
        "     ",
        "     ",
        "S   D",
    ])


def chain(arena, *positions):
    """Create nodes along positions, each the parent of the next"""
    node = arena.create(*positions[0])
    for pos in positions[1:]:
        node = arena.create(*pos, parent=node.id)
    return node


def test_obstacle_layer_mask(walled):
    layer = ObstacleLayer(walled)
    mask = layer.compute()
    hugging = {(x, y) for y in range(walled.height) for x in range(walled.width) if mask[y, x]}
    assert hugging == {(1, 1), (3, 1), (2, 0), (2, 2)}


def test_obstacle_layer_border_is_not_a_wall():
    grid = Grid.from_rows(["S  ", "   ", "  D"])
    layer = ObstacleLayer(grid)
    assert not layer.hugs_wall(0, 0)
    assert not layer.hugs_wall(2, 2)


def test_basic_surcharge_is_zero(walled):
    arena = NodeArena()
    node = chain(arena, (0, 2), (1, 2))
    adj = arena.create(2, 2, parent=node.id)
    model = BasicCost().bind(walled)
    assert model.surcharge(arena, node, adj, 3.0) == 0.0


def test_stealthy_discounts_wall_huggers(walled):
    arena = NodeArena()
    node = chain(arena, (0, 2), (1, 2))
    model = StealthyCost().bind(walled)

    hugging = arena.create(2, 2, parent=node.id)
    assert model.surcharge(arena, node, hugging, 5.0) == pytest.approx(-0.5)

    open_cell = arena.create(2, 3, parent=node.id)
    assert model.surcharge(arena, node, open_cell, 5.0) == 0.0


def test_stealthy_ignores_start_expansion(walled):
    arena = NodeArena()
    start = arena.create(1, 2)
    adj = arena.create(2, 2, parent=start.id)
    model = StealthyCost().bind(walled)
    assert model.surcharge(arena, start, adj, 5.0) == 0.0


def test_pretty_straight_along_wall(walled):
    arena = NodeArena()
    node = chain(arena, (0, 2), (1, 2))
    adj = arena.create(2, 2, parent=node.id)
    model = PrettyCost().bind(walled)
    assert model.surcharge(arena, node, adj, 0.0) == 10.0
    assert adj.inertia == 1


def test_pretty_zag_along_wall(walled):
    arena = NodeArena()
    node = chain(arena, (0, 3), (1, 2))
    adj = arena.create(2, 2, parent=node.id)
    model = PrettyCost().bind(walled)
    assert model.surcharge(arena, node, adj, 0.0) == 13.0
    assert adj.inertia == 0


def test_pretty_zag_in_the_open(walled):
    arena = NodeArena()
    node = chain(arena, (0, 2), (1, 2))
    adj = arena.create(2, 3, parent=node.id)
    model = PrettyCost().bind(walled)
    assert model.surcharge(arena, node, adj, 0.0) == 2.0


def test_pretty_straight_in_the_open(walled):
    arena = NodeArena()
    node = chain(arena, (0, 3), (1, 3))
    node.inertia = 3
    adj = arena.create(2, 3, parent=node.id)
    model = PrettyCost().bind(walled)
    assert model.surcharge(arena, node, adj, 0.0) == 0.0
    assert adj.inertia == 4


def test_pretty_inertia_limit(walled):
    arena = NodeArena()
    node = chain(arena, (0, 2), (1, 2))
    model = PrettyCost().bind(walled)

    node.inertia = 6
    adj = arena.create(2, 2, parent=node.id)
    assert model.surcharge(arena, node, adj, 0.0) == 10.0
    assert adj.inertia == 7

    node.inertia = 7
    adj = arena.create(2, 2, parent=node.id)
    assert model.surcharge(arena, node, adj, 0.0) == 0.0
    assert adj.inertia == 8


def test_pretty_ignores_start_expansion(walled):
    arena = NodeArena()
    start = arena.create(1, 2)
    adj = arena.create(2, 2, parent=start.id)
    model = PrettyCost().bind(walled)
    assert model.surcharge(arena, start, adj, 0.0) == 0.0
    assert adj.inertia == 0


def test_make_cost_model_with_weights():
    model = make_cost_model('pretty', {'pretty': {'zag': 5.0, 'inertia_limit': 4}})
    assert isinstance(model, PrettyCost)
    assert model.zag == 5.0
    assert model.inertia_limit == 4
    assert model.straight_wall == 10.0

    model = make_cost_model(Objective.STEALTHY, {'stealthy': {'wall_discount': 0.2}})
    assert isinstance(model, StealthyCost)
    assert model.wall_discount == 0.2

    assert isinstance(make_cost_model('basic'), BasicCost)


def test_make_cost_model_rejects_bad_input():
    with pytest.raises(ConfigurationError, match="bad objective"):
        make_cost_model('sneaky')
    with pytest.raises(ConfigurationError, match="bad parameters"):
        make_cost_model('stealthy', {'stealthy': {'discount': 0.2}})


def test_bind_returns_independent_model(walled):
    model = StealthyCost(wall_discount=0.3)
    bound = model.bind(walled)
    assert bound is not model
    assert model.obstacles is None
    assert bound.wall_discount == 0.3

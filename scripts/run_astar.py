#!/usr/bin/env python3
"""
Run the A* path finder on a random or loaded world.

Usage:
    python run_astar.py --config config/params.yaml --seed 42
    python run_astar.py --map maps/level.txt --objective pretty
"""

import argparse
import os
import sys
import time

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mapping.grid import Grid, MapFormatError
from mapping.level_generator import LevelGenerator
from planning.astar import AStarPlanner
from planning.config import ConfigurationError, load_config, validate_config
from visualization.visualizer import Visualizer


def build_config(args):
    """Load the YAML config and apply command line overrides"""
    config = load_config(args.config)
    overrides = {}
    if args.heuristic is not None:
        overrides['heuristic'] = args.heuristic
    if args.objective is not None:
        overrides['objective'] = args.objective
    if args.limit is not None:
        overrides['node_limit'] = args.limit
    if args.verbose:
        overrides['verbose'] = True
    if overrides:
        config.update(overrides)
        config = validate_config(config)
    return config


def main(args):
    try:
        config = build_config(args)
    except ConfigurationError as e:
        print(f"[Config] {e}", file=sys.stderr)
        return 2

    seed = args.seed if args.seed is not None else int(time.time() * 1000)

    # Get the world, either from a map file or freshly generated
    if args.map is not None:
        try:
            grid = Grid.load(args.map)
        except (OSError, MapFormatError) as e:
            print(f"[Map] {e}", file=sys.stderr)
            return 2
    else:
        generator = LevelGenerator(config['map']['width'], config['map']['height'],
                                   seed=seed, barrier_factor=config['barrier_factor'])
        try:
            # Start in the upper left corner
            grid = generator.layout((0, 0))
        except ValueError as e:
            print(f"[Map] {e}", file=sys.stderr)
            return 2

    planner = AStarPlanner(grid, config)
    result = planner.find(config['objective'])
    visualizer = Visualizer(config['visualization'])

    if result.found:
        shown = grid.copy()
        shown.walk(result.path)

        print(visualizer.render_text(shown))
        print(str(result.path) + "\n")
        print(f"path length: {len(result.path)}")
        if args.image:
            visualizer.save_image(shown, args.image)
            print(f"image: {args.image}")
    else:
        print(visualizer.render_text(grid))
        print("NO PATH !")

    print(f"node count: {result.node_count}")
    if args.map is None:
        print(f"seed: {seed}")

    return 0 if result.found else 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='A* path finder')
    parser.add_argument('--config', type=str, default='config/params.yaml',
                        help='Path to configuration file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for world generation (default: current time)')
    parser.add_argument('--map', type=str, default=None,
                        help='Tile map file to load instead of generating a world')
    parser.add_argument('--heuristic', type=str, default=None,
                        help='Override heuristic: euclidean, manhattan, checkers, sse')
    parser.add_argument('--objective', type=str, default=None,
                        help='Override objective: basic, pretty, stealthy')
    parser.add_argument('--limit', type=int, default=None,
                        help='Maximum number of nodes to generate')
    parser.add_argument('--image', type=str, default=None,
                        help='Also save the walked world as an image')
    parser.add_argument('--verbose', action='store_true',
                        help='Print planner summaries')
    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main(parse_args()))

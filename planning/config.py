"""
Configuration loading for the path finder.

Reads a YAML parameter file, fills in defaults and validates the
heuristic and objective names before any search runs.
"""

import copy
import yaml
from typing import Any, Dict

from costmap.objectives import Objective, make_cost_model
from planning.errors import ConfigurationError
from planning.heuristics import Heuristic


DEFAULT_CONFIG: Dict[str, Any] = {
    'map': {
        'width': 20,
        'height': 20
    },
    'heuristic': 'euclidean',
    'objective': 'basic',
    'node_limit': None,
    'barrier_factor': 0.45,
    'verbose': False,
    'objectives': {
        'stealthy': {
            'wall_discount': 0.10
        },
        'pretty': {
            'straight_wall': 10.0,
            'zag': 2.0,
            'wall_zag': 13.0,
            'inertia_limit': 8
        }
    },
    'visualization': {
        'cell_size': 24
    }
}


def _merge(base, override):
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None):
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for defaults only

    Returns:
        config: Validated configuration dictionary
    """
    if config_path is None:
        return validate_config({})

    try:
        with open(config_path, 'r') as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read config {config_path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"bad YAML in {config_path}: {e}")

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"config {config_path} must be a mapping")
    return validate_config(raw)


def validate_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Merge raw settings over the defaults and check every value"""
    config = _merge(DEFAULT_CONFIG, raw)

    config['heuristic'] = Heuristic.parse(config['heuristic'])
    config['objective'] = Objective.parse(config['objective'])
    # Build every model once so bad weights fail here, not mid-search
    for objective in Objective:
        make_cost_model(objective, config['objectives'])

    width = config['map'].get('width')
    height = config['map'].get('height')
    if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
        raise ConfigurationError(f"map size must be positive integers, got {width}x{height}")

    limit = config['node_limit']
    if limit is not None and (not isinstance(limit, int) or limit < 0):
        raise ConfigurationError(f"node_limit must be a non-negative integer or null, got {limit!r}")

    factor = config['barrier_factor']
    if not isinstance(factor, (int, float)) or not 0.0 <= factor <= 1.0:
        raise ConfigurationError(f"barrier_factor must be within [0, 1], got {factor!r}")

    return config

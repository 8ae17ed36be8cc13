"""
Errors shared by the configuration-facing modules.
"""


class ConfigurationError(ValueError):
    """Raised when the parameter file or a heuristic/objective selector is invalid."""

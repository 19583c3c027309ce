"""Centralized configuration management for boxlayout.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from boxlayout.config import EnvVar, get_environment
    >>>
    >>> indent = get_environment(EnvVar.BOXLAYOUT_JSON_INDENT)  # Returns int: 2
    >>> strict = get_environment(EnvVar.BOXLAYOUT_STRICT_IDS)  # Returns bool
    >>>
    >>> # Override at runtime
    >>> indent = get_environment(EnvVar.BOXLAYOUT_JSON_INDENT, override=4)

Environment Variable Categories:
    logging: Log verbosity
    output: CLI output formatting
    validation: Input checking policy
"""

from .lib import (
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    # Introspection
    "list_environment_variables",
]

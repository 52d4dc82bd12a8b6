"""
Configuration loading for conventional_commits.

Provides a simple loader for the user's configuration file. See
:mod:`conventional_commits.config.loader` for implementation details.
"""

from .loader import ConfigError, load_config, serializer_from_config  # noqa: F401

"""
Configuration package.

Logging options (level, log file) read from the environment
or app/.env into the Settings class.
"""

from .settings import Settings, env_bool

__all__ = ['Settings', 'env_bool']

"""
Configuration package.

This package provides library configuration management
via Settings class loaded from environment variables.
"""

from .settings import Settings, env_bool, load_env

__all__ = ['Settings', 'env_bool', 'load_env']

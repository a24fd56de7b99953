"""
Utility functions for locating the registry and setting up logging.
"""

from .paths import (
    PROFILE_SUFFIX,
    ProfilePaths,
    resolve_home,
    get_registry_dir,
    get_credentials_path,
)
from .logging import setup_logging

__all__ = [
    'PROFILE_SUFFIX',
    'ProfilePaths',
    'resolve_home',
    'get_registry_dir',
    'get_credentials_path',
    'setup_logging',
]

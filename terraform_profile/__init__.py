"""
Terraform Cloud profile switcher.

Keeps named copies of the Terraform Cloud credentials file in a registry
directory and points the credentials file at one of them with a symlink.
"""

__version__ = "0.1.0"

from .errors import TerraformProfileError
from .profiles import (
    LinkState,
    ActiveLink,
    load_profiles,
    resolve_active,
    switch_profile,
    import_profile,
    get_current_profile,
    list_profiles,
)
from .utils import ProfilePaths, resolve_home

__all__ = [
    '__version__',
    'TerraformProfileError',
    'LinkState',
    'ActiveLink',
    'load_profiles',
    'resolve_active',
    'switch_profile',
    'import_profile',
    'get_current_profile',
    'list_profiles',
    'ProfilePaths',
    'resolve_home',
]

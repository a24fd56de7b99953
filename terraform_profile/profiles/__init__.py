"""
Profile registry, credentials link and the commands built on them.
"""

from .registry import load_profiles, profile_name_from_filename, validate_profile_name
from .link import LinkState, ActiveLink, find_profile_name, resolve_active, switch_link
from .commands import switch_profile, import_profile, get_current_profile, list_profiles

__all__ = [
    'load_profiles',
    'profile_name_from_filename',
    'validate_profile_name',
    'LinkState',
    'ActiveLink',
    'find_profile_name',
    'resolve_active',
    'switch_link',
    'switch_profile',
    'import_profile',
    'get_current_profile',
    'list_profiles',
]

"""
Profile commands

Each function implements one CLI command on top of the registry and the
credentials link. They raise ``TerraformProfileError`` subclasses for
user-facing failures and let ``OSError`` propagate.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List

from ..errors import (
    AlreadyImportedError,
    EmptyRegistryError,
    NoActiveProfileError,
    NoCredentialsError,
    NotACredentialsFileError,
    ProfileExistsError,
    ProfileNotFoundError,
    UnknownLinkError,
)
from ..utils.paths import ProfilePaths
from .link import LinkState, resolve_active, switch_link
from .registry import validate_profile_name

logger = logging.getLogger(__name__)

__all__ = [
    'switch_profile',
    'import_profile',
    'get_current_profile',
    'list_profiles',
]

def switch_profile(paths: ProfilePaths, profiles: Dict[str, Path], name: str) -> Path:
    """
    Switch the credentials link to another registered profile.

    Args:
        paths: Registry and credentials locations
        profiles: Registry mapping from ``load_profiles``
        name: Name of the profile to switch to

    Returns:
        Path: The profile file now linked

    Raises:
        ProfileNotFoundError: If the profile isn't registered
        DestructiveOverwriteError: If an unregistered credentials file is in use
    """
    profile_path = profiles.get(name)
    if profile_path is None:
        raise ProfileNotFoundError(name)

    switch_link(paths.credentials_path, profiles, profile_path)
    return profile_path

def import_profile(paths: ProfilePaths, profiles: Dict[str, Path], name: str) -> Path:
    """
    Move the current unregistered credentials file into the registry.

    The credentials path is left empty afterwards; switch to the new profile
    to use it again.

    Args:
        paths: Registry and credentials locations
        profiles: Registry mapping from ``load_profiles``
        name: Name to register the credentials under

    Returns:
        Path: The new registry file

    Raises:
        InvalidProfileNameError: If the name can't be used as a file name
        AlreadyImportedError: If the credentials already link to a profile
        UnknownLinkError: If the credentials link outside the registry
        NoCredentialsError: If there is no credentials file
        NotACredentialsFileError: If the credentials path is not a regular file
        ProfileExistsError: If the name is already registered
        OSError: If the file can't be moved, e.g. across devices
    """
    validate_profile_name(name)

    current = resolve_active(paths.credentials_path, profiles)
    if current.is_symlink:
        if current.state is LinkState.ACTIVE:
            raise AlreadyImportedError(current.name)
        raise UnknownLinkError(current.target)
    if current.state is LinkState.ABSENT:
        raise NoCredentialsError(paths.credentials_path)
    if not paths.credentials_path.is_file():
        raise NotACredentialsFileError(paths.credentials_path)

    new_path = paths.profile_path(name)
    if name in profiles or os.path.lexists(new_path):
        raise ProfileExistsError(name, profiles.get(name, new_path))

    paths.registry_dir.mkdir(parents=True, exist_ok=True)
    os.rename(paths.credentials_path, new_path)
    profiles[name] = new_path
    logger.info("Moved %s to %s", paths.credentials_path, new_path)
    return new_path

def get_current_profile(paths: ProfilePaths, profiles: Dict[str, Path]) -> str:
    """
    Get the name of the profile the credentials link points at.

    Raises:
        NoActiveProfileError: If no registered profile is linked
    """
    current = resolve_active(paths.credentials_path, profiles)
    if current.state is LinkState.ACTIVE:
        return current.name
    if current.state is LinkState.FOREIGN:
        raise NoActiveProfileError(
            current.state,
            "An unregistered credentials file is in use. Import it to manage it as a profile.",
        )
    raise NoActiveProfileError(current.state)

def list_profiles(profiles: Dict[str, Path]) -> List[str]:
    """
    Get the registered profile names in registry scan order.

    Raises:
        EmptyRegistryError: If no profile is registered
    """
    if not profiles:
        raise EmptyRegistryError()
    return list(profiles)

"""
Profile registry

The registry is a directory of ``<name>.tfrc.json`` files. It is scanned on
every invocation to build a mapping from profile name to file path; nothing
else is persisted.
"""

import logging
import os
from pathlib import Path
from typing import Dict

from ..errors import InvalidProfileNameError, UndecodableProfileNameError
from ..utils.paths import PROFILE_SUFFIX

logger = logging.getLogger(__name__)

__all__ = [
    'load_profiles',
    'profile_name_from_filename',
    'validate_profile_name',
]

def _is_decodable(filename: str) -> bool:
    # os.scandir surrogate-escapes bytes that are not valid in the filesystem encoding
    try:
        filename.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True

def profile_name_from_filename(filename: str):
    """
    Get the profile name encoded in a registry file name.

    The name is the text before the first occurrence of the suffix.

    Args:
        filename: Base name of a registry entry

    Returns:
        The profile name, or None if the file is not a profile file
    """
    if not filename.endswith(PROFILE_SUFFIX):
        return None
    return filename.split(PROFILE_SUFFIX, 1)[0]

def validate_profile_name(name: str) -> str:
    """
    Check that a name can be stored as ``<name>.tfrc.json`` in the registry.

    Raises:
        InvalidProfileNameError: If the name is empty, contains a path
            separator, or contains the profile suffix
    """
    if not name or name.strip() != name:
        raise InvalidProfileNameError(name, "it must be non-empty without surrounding whitespace")
    if name in (".", "..") or "/" in name or (os.sep != "/" and os.sep in name):
        raise InvalidProfileNameError(name, "it must not contain a path separator")
    if PROFILE_SUFFIX in name:
        raise InvalidProfileNameError(name, f"it must not contain {PROFILE_SUFFIX!r}")
    return name

def load_profiles(directory: Path) -> Dict[str, Path]:
    """
    Get all the registry files and their profile names.

    The directory is created if it doesn't exist. Entries that are not
    ``*.tfrc.json`` files are skipped. If two entries give the same name,
    the one scanned last wins.

    Args:
        directory: Registry directory

    Returns:
        Dict[str, Path]: Profile names mapped to their files, in scan order

    Raises:
        UndecodableProfileNameError: If an entry's name is not valid text
        OSError: If the directory can't be created or read
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    profiles: Dict[str, Path] = {}
    with os.scandir(directory) as entries:
        for entry in entries:
            if not _is_decodable(entry.name):
                raise UndecodableProfileNameError(Path(entry.path))
            if entry.is_dir():
                logger.debug("Skipping directory %s", entry.path)
                continue

            name = profile_name_from_filename(entry.name)
            if name is None:
                logger.debug("Skipping non-profile file %s", entry.path)
                continue

            if name in profiles:
                logger.warning("Profile %r is defined twice, using %s", name, entry.path)
            profiles[name] = directory / entry.name

    logger.info("Loaded %d profile(s) from %s", len(profiles), directory)
    return profiles

"""
Credentials link manager

Terraform reads a single credentials file. This module resolves which
registered profile that file currently links to, and points it at another
profile.
"""

import contextlib
import enum
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from ..errors import DestructiveOverwriteError

logger = logging.getLogger(__name__)

__all__ = [
    'LinkState',
    'ActiveLink',
    'find_profile_name',
    'resolve_active',
    'switch_link',
]

class LinkState(enum.Enum):
    """What currently occupies the credentials path."""
    ACTIVE = "active"
    UNKNOWN = "unknown"
    ABSENT = "absent"
    FOREIGN = "foreign"

class ActiveLink:
    """Resolved state of the credentials path."""

    def __init__(self, state: LinkState, name: Optional[str] = None,
                 target: Optional[Path] = None):
        self.state = state
        self.name = name  # only set for ACTIVE
        self.target = target  # link target for ACTIVE and UNKNOWN

    @property
    def is_symlink(self) -> bool:
        return self.state in (LinkState.ACTIVE, LinkState.UNKNOWN)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ActiveLink):
            return NotImplemented
        return (self.state, self.name, self.target) == (other.state, other.name, other.target)

    def __repr__(self) -> str:
        return f"ActiveLink(state={self.state.name}, name={self.name!r}, target={self.target!r})"

def find_profile_name(target: Path, profiles: Dict[str, Path]) -> Optional[str]:
    """
    Get the profile name registered for a path.

    Paths are compared as-is, without resolving them on disk.
    """
    for name, path in profiles.items():
        if path == target:
            return name
    return None

def resolve_active(credentials_path: Path, profiles: Dict[str, Path]) -> ActiveLink:
    """
    Work out which profile the credentials path points at.

    Args:
        credentials_path: Path terraform reads its credentials from
        profiles: Registry mapping from ``load_profiles``

    Returns:
        ActiveLink: ACTIVE with the profile name, UNKNOWN for a link outside
        the registry, FOREIGN for a plain file, or ABSENT

    Raises:
        OSError: If the link can't be read
    """
    credentials_path = Path(credentials_path)

    if credentials_path.is_symlink():
        target = Path(os.readlink(credentials_path))
        name = find_profile_name(target, profiles)
        state = LinkState.ACTIVE if name is not None else LinkState.UNKNOWN
        link = ActiveLink(state, name=name, target=target)
    elif os.path.lexists(credentials_path):
        link = ActiveLink(LinkState.FOREIGN)
    else:
        link = ActiveLink(LinkState.ABSENT)

    logger.debug("Credentials path %s resolved to %r", credentials_path, link)
    return link

def _replace_symlink(profile_path: Path, credentials_path: Path) -> None:
    # Build the new link next to the old one and rename it into place so the
    # credentials path always exists for concurrent readers.
    credentials_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = credentials_path.with_name(f".{credentials_path.name}.{os.getpid()}.tmp")
    if os.path.lexists(tmp_path):
        tmp_path.unlink()

    os.symlink(profile_path, tmp_path)
    try:
        os.replace(tmp_path, credentials_path)
    except OSError:
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        raise

def switch_link(credentials_path: Path, profiles: Dict[str, Path], profile_path: Path) -> ActiveLink:
    """
    Point the credentials path at a profile file.

    Args:
        credentials_path: Path terraform reads its credentials from
        profiles: Registry mapping from ``load_profiles``
        profile_path: Registry file to link to

    Returns:
        ActiveLink: The state found before the switch

    Raises:
        DestructiveOverwriteError: If a plain credentials file is in the way
        OSError: If the link can't be created
    """
    credentials_path = Path(credentials_path)
    previous = resolve_active(credentials_path, profiles)

    if previous.state is LinkState.FOREIGN:
        raise DestructiveOverwriteError()

    _replace_symlink(Path(profile_path), credentials_path)
    logger.info("Linked %s -> %s (was %s)", credentials_path, profile_path, previous.state.value)
    return previous

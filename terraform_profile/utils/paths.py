"""
Well-known locations used by terraform-profile.

The registry directory and the credentials link both live under the user's
home directory. They are bundled in a ``ProfilePaths`` object that is passed
explicitly to every operation.
"""

from pathlib import Path
from typing import Optional

from ..errors import HomeResolutionError

PROFILE_SUFFIX = ".tfrc.json"
REGISTRY_DIRNAME = ".terraform_profile"
TERRAFORM_DIRNAME = ".terraform.d"
CREDENTIALS_FILENAME = f"credentials{PROFILE_SUFFIX}"

def resolve_home() -> Path:
    """
    Get the current user's home directory.

    Returns:
        Path: Absolute path to the home directory

    Raises:
        HomeResolutionError: If the home directory can't be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeResolutionError(str(e)) from e

    if str(home) in ("", ".", "~"):
        raise HomeResolutionError()
    return home.absolute()

def get_registry_dir(home: Path) -> Path:
    """Get the directory holding the registered profiles."""
    return home / REGISTRY_DIRNAME

def get_credentials_path(home: Path) -> Path:
    """Get the path of the credentials file read by terraform."""
    return home / TERRAFORM_DIRNAME / CREDENTIALS_FILENAME

class ProfilePaths:
    """Locations of the registry directory and the credentials link."""

    def __init__(self, registry_dir: Path, credentials_path: Path):
        self.registry_dir = Path(registry_dir)
        self.credentials_path = Path(credentials_path)

    @classmethod
    def from_home(cls, home: Optional[Path] = None) -> "ProfilePaths":
        """
        Build the default locations for a home directory.

        Args:
            home: Home directory to use, resolved from the environment if None

        Returns:
            ProfilePaths: The registry and credentials locations
        """
        home = Path(home).absolute() if home is not None else resolve_home()
        return cls(get_registry_dir(home), get_credentials_path(home))

    def profile_path(self, name: str) -> Path:
        """Get the registry file path backing a profile name."""
        return self.registry_dir / f"{name}{PROFILE_SUFFIX}"

    def __repr__(self) -> str:
        return (f"ProfilePaths(registry_dir={str(self.registry_dir)!r}, "
                f"credentials_path={str(self.credentials_path)!r})")

"""Exceptions raised by the profile registry and command handlers."""

from pathlib import Path
from typing import Optional

class TerraformProfileError(Exception):
    """Base exception for terraform-profile errors."""

    pass

class HomeResolutionError(TerraformProfileError):
    """The user's home directory could not be determined."""

    def __init__(self, reason: Optional[str] = None):
        message = "Impossible to get your home dir!"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

class InvalidProfileNameError(TerraformProfileError):
    """The profile name cannot be used as a registry file name."""

    def __init__(self, name: str, reason: str):
        self.name = name
        super().__init__(f"Invalid profile name {name!r}: {reason}.")

class UndecodableProfileNameError(TerraformProfileError):
    """A registry entry has a file name that is not valid text."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Couldn't decode the profile file name {path!r}.")

class ProfileNotFoundError(TerraformProfileError):
    """The requested profile is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Couldn't find the profile to switch with.")

class DestructiveOverwriteError(TerraformProfileError):
    """A plain credentials file would be overwritten."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "A non-profile credentials already exists. This is a destructive "
            "operation, you should import or delete it first."
        )

class ProfileExistsError(DestructiveOverwriteError):
    """A profile with the same name is already registered."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"A profile named `{name}` already exists at {path}.")

class AlreadyImportedError(TerraformProfileError):
    """The credentials link already points at a registered profile."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"The profile is already imported under `{name}`")

class UnknownLinkError(TerraformProfileError):
    """The credentials link points outside the registry."""

    def __init__(self, target: Optional[Path] = None):
        self.target = target
        super().__init__("The profile is an unknown symbolic link.")

class NoCredentialsError(TerraformProfileError):
    """There is no credentials file to import."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No credentials file to import at {path}.")

class NotACredentialsFileError(TerraformProfileError):
    """The credentials path holds something other than a regular file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} is not a regular file and can't be imported as a profile.")

class NoActiveProfileError(TerraformProfileError):
    """No registered profile is currently linked."""

    def __init__(self, state, message: Optional[str] = None):
        self.state = state
        super().__init__(message or "No profile is currently in use.")

class EmptyRegistryError(TerraformProfileError):
    """The registry holds no profiles."""

    def __init__(self):
        super().__init__("No profiles are currently available")

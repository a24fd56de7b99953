"""
Shared test fixtures and configuration.
"""

import os
import sys
import tempfile

import pytest

# Add the parent directory to the path so we can import the terraform_profile package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from terraform_profile.utils import ProfilePaths

def _can_symlink():
    with tempfile.TemporaryDirectory() as tmp:
        try:
            os.symlink(os.path.join(tmp, "target"), os.path.join(tmp, "link"))
        except (OSError, NotImplementedError):
            return False
    return True

CAN_SYMLINK = _can_symlink()

def pytest_configure(config):
    config.addinivalue_line("markers", "symlink: test needs to create symbolic links")

def pytest_runtest_setup(item):
    if item.get_closest_marker("symlink") and not CAN_SYMLINK:
        pytest.skip("symlinks are not supported on this platform")

@pytest.fixture
def home(tmp_path):
    """Fake home directory."""
    path = tmp_path / "home"
    path.mkdir()
    return path

@pytest.fixture
def paths(home):
    """Registry and credentials locations under the fake home."""
    return ProfilePaths.from_home(home)

@pytest.fixture
def make_profile(paths):
    """Factory writing a profile file into the registry directory."""
    def _make_profile(name, token=None):
        paths.registry_dir.mkdir(parents=True, exist_ok=True)
        path = paths.profile_path(name)
        path.write_text('{"credentials": {"app.terraform.io": {"token": "%s"}}}' % (token or name))
        return path
    return _make_profile

@pytest.fixture
def plain_credentials(paths):
    """Write an unregistered credentials file at the credentials path."""
    paths.credentials_path.parent.mkdir(parents=True, exist_ok=True)
    paths.credentials_path.write_text('{"credentials": {"app.terraform.io": {"token": "foreign"}}}')
    return paths.credentials_path

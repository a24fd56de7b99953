"""
Tests for the switch, import, status and list commands.
"""

import os

import pytest

from terraform_profile.errors import (
    AlreadyImportedError,
    DestructiveOverwriteError,
    EmptyRegistryError,
    InvalidProfileNameError,
    NoActiveProfileError,
    NoCredentialsError,
    NotACredentialsFileError,
    ProfileExistsError,
    ProfileNotFoundError,
    UnknownLinkError,
)
from terraform_profile.profiles import (
    LinkState,
    load_profiles,
    switch_profile,
    import_profile,
    get_current_profile,
    list_profiles,
)

@pytest.fixture
def registry(paths, make_profile):
    """Registry holding alice and bob."""
    make_profile("alice")
    make_profile("bob")
    return load_profiles(paths.registry_dir)

@pytest.mark.symlink
def test_switch_then_status(paths, registry):
    """Test that status reports the profile just switched to."""
    for name in ("bob", "alice", "bob"):
        switch_profile(paths, registry, name)
        assert get_current_profile(paths, registry) == name

@pytest.mark.symlink
def test_status_is_idempotent(paths, registry):
    """Test that status doesn't change anything."""
    switch_profile(paths, registry, "alice")

    assert get_current_profile(paths, registry) == get_current_profile(paths, registry) == "alice"

@pytest.mark.symlink
def test_switch_unknown_profile_keeps_link(paths, registry):
    """Test switching to an unregistered name leaves the link alone."""
    switch_profile(paths, registry, "bob")

    with pytest.raises(ProfileNotFoundError) as excinfo:
        switch_profile(paths, registry, "carol")

    assert excinfo.value.name == "carol"
    assert os.readlink(paths.credentials_path) == str(registry["bob"])
    assert get_current_profile(paths, registry) == "bob"

def test_switch_refuses_plain_credentials(paths, registry, plain_credentials):
    """Test switching over an unregistered credentials file."""
    content = plain_credentials.read_text()

    with pytest.raises(DestructiveOverwriteError):
        switch_profile(paths, registry, "alice")

    assert not plain_credentials.is_symlink()
    assert plain_credentials.read_text() == content

@pytest.mark.symlink
def test_import_then_switch(paths, registry, plain_credentials):
    """Test importing the current credentials file and switching to it."""
    content = plain_credentials.read_text()

    new_path = import_profile(paths, registry, "work")

    assert new_path == paths.registry_dir / "work.tfrc.json"
    assert new_path.read_text() == content
    assert not os.path.lexists(paths.credentials_path)
    assert registry["work"] == new_path

    reloaded = load_profiles(paths.registry_dir)
    assert set(reloaded) == {"alice", "bob", "work"}
    switch_profile(paths, reloaded, "work")
    assert get_current_profile(paths, reloaded) == "work"

@pytest.mark.symlink
def test_import_refuses_known_link(paths, registry):
    """Test importing when the credentials already link to a profile."""
    switch_profile(paths, registry, "alice")

    with pytest.raises(AlreadyImportedError) as excinfo:
        import_profile(paths, registry, "work")

    assert excinfo.value.name == "alice"
    assert str(excinfo.value) == "The profile is already imported under `alice`"
    assert not paths.profile_path("work").exists()
    assert os.readlink(paths.credentials_path) == str(registry["alice"])

@pytest.mark.symlink
def test_import_refuses_unknown_link(paths, registry, tmp_path):
    """Test importing when the credentials link outside the registry."""
    elsewhere = tmp_path / "elsewhere.json"
    elsewhere.write_text("{}")
    paths.credentials_path.parent.mkdir(parents=True)
    os.symlink(elsewhere, paths.credentials_path)

    with pytest.raises(UnknownLinkError):
        import_profile(paths, registry, "work")

    assert not paths.profile_path("work").exists()
    assert os.readlink(paths.credentials_path) == str(elsewhere)
    assert elsewhere.read_text() == "{}"

def test_import_without_credentials(paths, registry):
    """Test importing when there is nothing to import."""
    with pytest.raises(NoCredentialsError):
        import_profile(paths, registry, "work")

def test_import_refuses_directory(paths, registry):
    """Test that a directory at the credentials path is not moved into the registry."""
    paths.credentials_path.mkdir(parents=True)

    with pytest.raises(NotACredentialsFileError):
        import_profile(paths, registry, "work")

    assert paths.credentials_path.is_dir()
    assert not os.path.lexists(paths.profile_path("work"))
    assert "work" not in registry
    assert set(load_profiles(paths.registry_dir)) == {"alice", "bob"}

def test_import_refuses_existing_name(paths, registry, plain_credentials):
    """Test that importing never overwrites a registered profile."""
    original = registry["alice"].read_text()

    with pytest.raises(ProfileExistsError):
        import_profile(paths, registry, "alice")

    assert registry["alice"].read_text() == original
    assert plain_credentials.exists()

def test_import_rejects_invalid_name(paths, registry, plain_credentials):
    """Test that an unusable name is rejected before moving anything."""
    with pytest.raises(InvalidProfileNameError):
        import_profile(paths, registry, "work.tfrc.json")

    assert plain_credentials.exists()

def test_status_without_credentials(paths, registry):
    """Test status when there is no credentials file."""
    with pytest.raises(NoActiveProfileError) as excinfo:
        get_current_profile(paths, registry)

    assert excinfo.value.state is LinkState.ABSENT
    assert str(excinfo.value) == "No profile is currently in use."

@pytest.mark.symlink
def test_status_unknown_link(paths, registry, tmp_path):
    """Test status when the credentials link outside the registry."""
    paths.credentials_path.parent.mkdir(parents=True)
    os.symlink(tmp_path / "elsewhere.json", paths.credentials_path)

    with pytest.raises(NoActiveProfileError) as excinfo:
        get_current_profile(paths, registry)

    assert excinfo.value.state is LinkState.UNKNOWN

def test_status_plain_credentials(paths, registry, plain_credentials):
    """Test that an unregistered credentials file gets its own message."""
    with pytest.raises(NoActiveProfileError) as excinfo:
        get_current_profile(paths, registry)

    assert excinfo.value.state is LinkState.FOREIGN
    assert "unregistered credentials file" in str(excinfo.value)

def test_list_profiles(registry):
    """Test that every profile is listed exactly once."""
    names = list_profiles(registry)

    assert sorted(names) == ["alice", "bob"]

def test_list_profiles_empty():
    """Test listing an empty registry."""
    with pytest.raises(EmptyRegistryError):
        list_profiles({})

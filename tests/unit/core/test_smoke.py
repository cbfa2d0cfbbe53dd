"""Smoke tests to verify basic package structure and imports."""

import users_service


def test_package_imports():
    """Verify the package can be imported."""
    assert users_service is not None


def test_package_has_version():
    """Verify the package exposes a version string."""
    assert hasattr(users_service, "__version__")
    assert isinstance(users_service.__version__, str)
    assert len(users_service.__version__) > 0


def test_version_format():
    """Verify version follows semantic versioning format."""
    version = users_service.__version__
    parts = version.split(".")
    assert len(parts) >= 3, "Version should have at least major.minor.patch"
    assert parts[0].isdigit(), "Major version should be numeric"
    assert parts[1].isdigit(), "Minor version should be numeric"

"""
Project-wide pytest configuration.

This module tunes Django settings for tests, auto-marks tests by file and
provides project-wide fixtures (clients, users, an audio bundle and file).
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os

import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")


def pytest_configure():
    """Tune Django settings for the test run."""
    from django.conf import settings

    # Use fast password hasher for tests
    settings.PASSWORD_HASHERS = [
        "django.contrib.auth.hashers.MD5PasswordHasher",
    ]


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_integration.py → e2e (full widget workflows through the API)
    - test_views.py, test_services.py, test_storage.py → integration
    - test_models.py, test_forms.py, test_validators.py, etc. → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    e2e_patterns = ["test_integration.py"]

    integration_patterns = [
        "test_views.py",
        "test_services.py",
        "test_storage.py",
    ]

    unit_patterns = [
        "test_models.py",
        "test_serializers.py",
        "test_validators.py",
        "test_forms.py",
        "test_registry.py",
        "test_widgets.py",
        "test_upload_widget.py",
        "test_base_widget.py",
        "test_exceptions.py",
    ]

    for item in items:
        # Skip if test already has unit/integration/e2e marker
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration", "e2e"}:
            continue

        filename = os.path.basename(str(item.fspath))

        if any(pattern in filename for pattern in e2e_patterns):
            item.add_marker(pytest.mark.e2e)
        elif any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        elif any(pattern in filename for pattern in unit_patterns):
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploaded files under a per-test temporary directory."""
    settings.MEDIA_ROOT = tmp_path / "uploads"
    return settings.MEDIA_ROOT


@pytest.fixture
def api_client():
    """Return unauthenticated API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def user(db):
    """Create a regular user."""
    from media.tests.factories import UserFactory

    return UserFactory()


@pytest.fixture
def staff_user(db):
    """Create a staff user allowed to administer bundles and widgets."""
    from media.tests.factories import UserFactory

    return UserFactory(is_staff=True)


@pytest.fixture
def authenticated_client(user):
    """Return API client authenticated as a regular user."""
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def staff_client(staff_user):
    """Return API client authenticated as a staff user."""
    from rest_framework.test import APIClient

    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def audio_bundle(db):
    """Audio bundle ``podcast`` with source field ``field_media_audio_file``."""
    from media.tests.factories import MediaBundleFactory

    return MediaBundleFactory(id="podcast", label="Podcast episode")


@pytest.fixture
def audio_file(user):
    """Temporary uploaded MP3 file."""
    from media.tests.factories import MediaFileFactory

    return MediaFileFactory(original_filename="episode.mp3", uploader=user)

from collections.abc import Generator

import pytest

from create_anta_app.scaffolding import ProjectDetails

# Environment variables that may affect test behavior - clear before each test
_CREATE_ANTA_APP_ENV_VARS = [
    "CREATE_ANTA_APP_REPO",
    "CREATE_ANTA_APP_EXECUTOR",
    "CREATE_ANTA_APP_SKIP_INSTALL",
    "CREATE_ANTA_APP_SKIP_DEV",
    "CREATE_ANTA_APP_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_create_anta_app_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear create-anta-app environment variables before each test for isolation."""
    for var in _CREATE_ANTA_APP_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def details() -> ProjectDetails:
    return ProjectDetails(
        project_title="My Anta App",
        tagline="Built with Anta",
        primary_color="#3B82F6",
        secondary_color="#1E40AF",
    )

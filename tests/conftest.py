"""Shared fixtures for the record tests."""

import os
from collections.abc import Iterator

import pytest

from cloud_records.settings import (
    AutoscalingDefaults,
    RepositoryDefaults,
    ServiceDefaults,
    get_settings,
)

ENV_PREFIXES = ("ASG_", "ECR_", "ECS_")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Load record defaults from a clean environment with no env file."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIXES):
            monkeypatch.delenv(key)
    for settings_class in (AutoscalingDefaults, RepositoryDefaults, ServiceDefaults):
        monkeypatch.setitem(settings_class.model_config, "env_file", None)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

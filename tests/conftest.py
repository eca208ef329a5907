"""Shared test fixtures."""

from __future__ import annotations

import pytest

from inlinestyle.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a configuration file named by the environment out of tests."""

    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

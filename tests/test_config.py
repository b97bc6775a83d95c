from __future__ import annotations

import pytest

from menu_api.core.config import Settings


def test_defaults() -> None:
    config = Settings(_env_file=None)

    assert config.port == 3000
    assert config.seed_menu is True
    assert config.sentry_dsn is None


def test_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SEED_MENU", "false")

    config = Settings(_env_file=None)

    assert config.port == 8080
    assert config.seed_menu is False

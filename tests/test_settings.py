"""Settings round-trip through a QSettings INI file in a temp directory."""
from __future__ import annotations

import pytest

from vitals import settings


@pytest.fixture
def ini(tmp_path):
    settings.new_settings(tmp_path)
    yield tmp_path
    settings.SETTINGS = None


def test_defaults(ini) -> None:
    assert settings.get("dashboard/capacity") == 30
    assert settings.get("dashboard/interval_ms") == 1000
    assert settings.get("dashboard/animation_ms") == 200
    assert settings.get("dashboard/seed") == -1
    assert settings.get("app/theme") == "dark"


def test_set_coerces_to_default_type(ini) -> None:
    settings.set("dashboard/capacity", "45")
    assert settings.get("dashboard/capacity") == 45
    assert (ini / "_cache.vitals").exists()


def test_set_rejects_unconvertible_value(ini) -> None:
    with pytest.raises(ValueError):
        settings.set("dashboard/interval_ms", "soon")


def test_unknown_key(ini) -> None:
    with pytest.raises(KeyError):
        settings.get("dashboard/nope")

"""Unit tests for settings loading and override layering."""

import pytest

from folio.utils.config import SETTINGS_PATH, load_settings


@pytest.mark.unit
def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("FOLIO_CONTENT_SOURCE", raising=False)
    settings = load_settings()

    assert settings.content.source == "src/data.json"
    assert settings.content.timeout_s == 5.0
    assert settings.navigation.header_offset == 80
    assert settings.navigation.scroll_threshold == 100
    assert settings.navigation.debounce_ms == 10
    assert settings.navigation.hash_settle_delay_ms == 100
    assert settings.navigation.scrollspy.root_margin == "-100px 0px -50% 0px"
    assert settings.navigation.scrollspy.threshold == 0.1
    assert settings.animation.root_margin == "0px 0px -50px 0px"
    assert settings.animation.install_delay_ms == 100
    assert settings.server.port == 3000


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "5055")
    monkeypatch.setenv("FOLIO_CONTENT_SOURCE", "https://example.com/data.json")
    settings = load_settings()

    assert settings.server.port == 5055
    assert settings.content.source == "https://example.com/data.json"


@pytest.mark.unit
def test_dotlist_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("PORT", "5055")
    settings = load_settings(overrides=["server.port=8080", "navigation.header_offset=64"])

    assert settings.server.port == 8080
    assert settings.navigation.header_offset == 64


@pytest.mark.unit
def test_explicit_settings_file(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    path = tmp_path / "settings.yaml"
    path.write_text(SETTINGS_PATH.read_text().replace("port: 3000", "port: 4000"))

    assert load_settings(path).server.port == 4000


@pytest.mark.unit
def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")

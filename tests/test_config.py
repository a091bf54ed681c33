"""Tests for configuration module."""

from labelforge.config import BUNDLED_TEMPLATE_DIR, Settings


def test_settings_defaults(monkeypatch):
    """System templates default to the bundled data directory."""
    monkeypatch.delenv("LABELFORGE_SYSTEM_DIR", raising=False)
    monkeypatch.delenv("LABELFORGE_USER_DIR", raising=False)
    monkeypatch.delenv("LABELFORGE_DEFAULT_PAGE_SIZE", raising=False)
    s = Settings()
    assert s.system_data_dir == BUNDLED_TEMPLATE_DIR
    assert s.user_data_dir.name == ".labelforge"
    assert s.default_page_size is None


def test_settings_from_environment(monkeypatch, tmp_path):
    """Directories can be overridden through environment variables."""
    monkeypatch.setenv("LABELFORGE_SYSTEM_DIR", str(tmp_path / "system"))
    monkeypatch.setenv("LABELFORGE_USER_DIR", str(tmp_path / "user"))
    monkeypatch.setenv("LABELFORGE_DEFAULT_PAGE_SIZE", "A4")
    s = Settings()
    assert s.system_data_dir == tmp_path / "system"
    assert s.user_data_dir == tmp_path / "user"
    assert s.default_page_size == "A4"

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import AppSettings, write_user_env_vars


def test_defaults_match_local_map_server():
    settings = AppSettings()

    assert settings.map_document_url == "http://localhost:8080/maps/map1.tmx"
    assert settings.map_image_url == "http://localhost:8080/maps/map1.png"
    assert settings.mount_target == "app"
    assert settings.http_timeout_seconds is None


def test_env_prefix_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAP_BOOT_MAP_DOCUMENT_URL", "http://cdn.test/map2.tmx")
    monkeypatch.setenv("MAP_BOOT_HTTP_TIMEOUT_SECONDS", "3")

    settings = AppSettings()

    assert settings.map_document_url == "http://cdn.test/map2.tmx"
    assert settings.http_timeout_seconds == 3.0


def test_non_positive_timeout_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MAP_BOOT_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValueError):
        AppSettings()


def test_write_user_env_vars_merges(tmp_path: Path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text('# old\nMAP_BOOT_MOUNT_TARGET="root"\nMAP_BOOT_USER_AGENT=ua\n', encoding="utf-8")

    out = write_user_env_vars({"MAP_BOOT_MOUNT_TARGET": "app"}, env_path=env_path)

    assert out == env_path
    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "MAP_BOOT_MOUNT_TARGET=app" in lines
    assert "MAP_BOOT_USER_AGENT=ua" in lines


def test_stray_env_files_do_not_leak_into_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".env").write_text("MAP_BOOT_MOUNT_TARGET=game\nMAP_BOOT_HTTP_TIMEOUT_SECONDS=5\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = AppSettings()

    assert settings.mount_target == "app"
    assert settings.http_timeout_seconds is None


def test_explicit_env_file_is_read(tmp_path: Path):
    env_path = write_user_env_vars({"MAP_BOOT_MOUNT_TARGET": "game"}, env_path=tmp_path / ".env")

    settings = AppSettings(_env_file=env_path)

    assert settings.mount_target == "game"

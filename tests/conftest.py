from __future__ import annotations

import os
from pathlib import Path

import httpx
import pytest

from core.config import AppSettings
from core.domain.models import InitializationPayload

MAP_URL = "http://maps.test/maps/map1.tmx"
MAP_PNG_URL = "http://maps.test/maps/map1.png"


class RecordingApplication:
    """ApplicationEntryPoint que guarda cada llamada."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, InitializationPayload]] = []

    def initialize(self, mount_target: str, payload: InitializationPayload) -> None:
        self.calls.append((mount_target, payload))


class RecordingSink:
    def __init__(self) -> None:
        self.errors: list[Exception] = []

    def report(self, error: Exception) -> None:
        self.errors.append(error)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """`AppSettings` sin `.env` (proyecto ni usuario) ni variables `MAP_BOOT_*` del entorno."""

    for key in list(os.environ):
        if key.upper().startswith("MAP_BOOT_"):
            monkeypatch.delenv(key)
    monkeypatch.setitem(AppSettings.model_config, "env_file", None)


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        map_document_url=MAP_URL,
        map_image_url=MAP_PNG_URL,
        assets_dir=tmp_path / "images",
        mount_target="app",
    )


@pytest.fixture
def application() -> RecordingApplication:
    return RecordingApplication()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_client():
    """Factory de `httpx.AsyncClient` servido por un handler en memoria."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)

    return _make

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings
from core.resources_loader import MAP_DOCUMENT_NAME, build_manifest, resolve_bundled_asset


def test_resolve_bundled_asset_does_not_touch_disk(tmp_path: Path):
    missing_dir = tmp_path / "does-not-exist"

    resource = resolve_bundled_asset("pink", assets_dir=missing_dir)

    assert resource.name == "pink"
    assert resource.location == str((missing_dir / "pink.png").resolve())
    assert not missing_dir.exists()


def test_build_manifest_from_settings(tmp_path: Path):
    settings = AppSettings(
        map_document_url="http://host/maps/m.tmx",
        map_image_url="http://host/maps/m.png",
        assets_dir=tmp_path,
    )

    manifest = build_manifest(settings)

    assert manifest.pink.location.endswith("pink.png")
    assert manifest.red.location.endswith("red.png")
    assert manifest.map_image_url == "http://host/maps/m.png"
    assert manifest.map_document.name == MAP_DOCUMENT_NAME
    assert manifest.map_document.location == "http://host/maps/m.tmx"


def test_default_assets_are_shipped():
    manifest = build_manifest(AppSettings())

    for resource in manifest.bundled_resources():
        assert Path(resource.location).is_file()


def test_default_assets_live_inside_the_core_package():
    import core.config

    assert AppSettings().assets_dir == Path(core.config.__file__).resolve().parent / "assets"

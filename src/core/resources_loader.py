"""Resolución de recursos del bootstrap.

Este módulo vive en `core/` porque:
- centraliza el *qué* recursos necesita la aplicación (manifest) sin acoplarse
  a la CLI ni al transporte HTTP.
- los assets empaquetados se resuelven aquí, antes de cualquier descarga.

No descarga nada: la única I/O de red ocurre en el orquestador.
"""

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings
from core.domain.models import BundledResource, NetworkResource, ResourceManifest

BUNDLED_ASSETS: dict[str, str] = {
    "pink": "pink.png",
    "red": "red.png",
}

MAP_DOCUMENT_NAME = "map1_tmx"


def resolve_bundled_asset(name: str, *, assets_dir: Path) -> BundledResource:
    """Resuelve un asset empaquetado a su ruta.

    Reglas:
    - Resolución pura: no comprueba existencia ni abre el fichero.
    - Nunca falla para un nombre conocido (los assets viajan con el programa).
    """

    filename = BUNDLED_ASSETS[name]
    location = (assets_dir / filename).resolve(strict=False)
    return BundledResource(name=name, location=str(location))


def build_manifest(settings: AppSettings | None = None) -> ResourceManifest:
    """Construye el manifest fijo a partir de la configuración."""

    settings = settings or AppSettings()
    return ResourceManifest(
        pink=resolve_bundled_asset("pink", assets_dir=settings.assets_dir),
        red=resolve_bundled_asset("red", assets_dir=settings.assets_dir),
        map_image_url=settings.map_image_url,
        map_document=NetworkResource(name=MAP_DOCUMENT_NAME, location=settings.map_document_url),
    )

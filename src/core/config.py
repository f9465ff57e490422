"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/handoff) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "map-bootstrap"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "map-bootstrap"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "map-bootstrap"
    return Path.home() / ".config" / "map-bootstrap"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# map-bootstrap user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


def _default_assets_dir() -> Path:
    # Se instalan como package data de `core`.
    return Path(__file__).resolve().parent / "assets"


class AppSettings(BaseSettings):
    """Configuración central del bootstrap.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAP_BOOT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    map_document_url: str = Field(
        default="http://localhost:8080/maps/map1.tmx",
        min_length=1,
        description="URL del documento de definición del mapa (TMX), se descarga al arrancar.",
    )
    map_image_url: str = Field(
        default="http://localhost:8080/maps/map1.png",
        min_length=1,
        description="URL de la imagen del mapa; se entrega tal cual, sin descargarla.",
    )
    assets_dir: Path = Field(
        default_factory=_default_assets_dir,
        description="Directorio con los assets empaquetados (pink.png, red.png).",
    )
    mount_target: str = Field(
        default="app",
        min_length=1,
        description="Identificador del nodo donde se monta la aplicación.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="map-bootstrap/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la descarga del mapa.",
    )

"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import InitializationPayload

_PREVIEW_CHARS = 60


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("map-bootstrap", style="bold cyan")
    subtitle = Text("Recursos • Handoff • Aplicación", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="Configuración")
    table.add_column("Clave", style="cyan", no_wrap=True)
    table.add_column("Valor", style="white")
    table.add_row("map_document_url", escape(settings.map_document_url))
    table.add_row("map_image_url", escape(settings.map_image_url))
    table.add_row("assets_dir", str(settings.assets_dir))
    table.add_row("mount_target", settings.mount_target)
    timeout = "sin timeout" if settings.http_timeout_seconds is None else f"{settings.http_timeout_seconds}s"
    table.add_row("http_timeout", timeout)
    return table


def build_payload_table(payload: InitializationPayload) -> Table:
    """Tabla con los flags entregados (el documento del mapa se recorta)."""

    table = Table(title="Initialization flags")
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Valor", style="magenta")
    for key, value in payload.to_flags().items():
        shown = value if len(value) <= _PREVIEW_CHARS else value[:_PREVIEW_CHARS] + "…"
        if key == "map1Tmx":
            shown = f"{shown!r} ({len(value)} chars)"
        table.add_row(key, escape(shown))
    return table

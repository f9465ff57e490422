"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import build_settings_table
from core.config import AppSettings
from core.resources_loader import build_manifest

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

# El probe siempre termina, aunque el bootstrap no tenga timeout.
PROBE_TIMEOUT_SECONDS = 20.0


async def check_http(
    url: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    settings = settings or AppSettings()
    timeout = settings.http_timeout_seconds or PROBE_TIMEOUT_SECONDS
    probe_settings = settings.model_copy(update={"http_timeout_seconds": timeout})
    try:
        async with build_async_client(probe_settings, transport=transport) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective configuration and probe the map URL."""

    settings = AppSettings()
    _console.print(build_settings_table(settings))

    table = Table(title="map-bootstrap Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Assets (solo informativo: la resolución no comprueba existencia)
    manifest = build_manifest(settings)
    for asset in manifest.bundled_resources():
        found = Path(asset.location).is_file()
        table.add_row(f"asset {asset.name}", "OK" if found else "MISSING", asset.location)

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(check_http(settings.map_document_url, settings))
    table.add_row("Map document", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] `run` will exit with status 1 until the map document is reachable."
        )

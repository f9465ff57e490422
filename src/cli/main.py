"""CLI de map-bootstrap (Typer).

Por qué la CLI es delgada:
- Toda la secuencia (resolver, descargar, entregar) vive en
  `core.services.bootstrap`; aquí solo se cablean adaptadores y se decide el
  código de salida.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from adapters.diagnostics import ConsoleDiagnosticSink
from adapters.http_client import HttpResourceFetcher, build_async_client
from adapters.json_handoff import JsonHandoffApplication
from cli import doctor
from cli.ui_components import build_payload_table, print_banner
from core.config import AppSettings, write_user_env_vars
from core.domain.models import InitializationOutcome
from core.interfaces.application import ApplicationEntryPoint, DiagnosticSink
from core.resources_loader import build_manifest
from core.services.bootstrap import BootstrapOrchestrator

app = typer.Typer(no_args_is_help=True, help="Bootstrap: descarga el mapa y entrega los flags a la aplicación.")
app.add_typer(doctor.app, name="doctor")

_console = Console(stderr=True)


async def bootstrap_application(
    *,
    settings: AppSettings,
    application: ApplicationEntryPoint,
    diagnostics: DiagnosticSink,
) -> InitializationOutcome:
    """Cablea el orquestador con un cliente httpx que vive lo que dura `run()`."""

    manifest = build_manifest(settings)
    async with build_async_client(settings) as client:
        orchestrator = BootstrapOrchestrator(
            manifest=manifest,
            application=application,
            diagnostics=diagnostics,
            fetcher=HttpResourceFetcher(client),
            mount_target=settings.mount_target,
        )
        return await orchestrator.run()


@app.command(name="run")
def run_command(
    map_url: str | None = typer.Option(None, "--map-url", help="URL del documento TMX."),
    map_image_url: str | None = typer.Option(None, "--map-image-url", help="URL de la imagen del mapa."),
    assets_dir: Path | None = typer.Option(None, "--assets-dir", help="Directorio de assets empaquetados."),
    mount: str | None = typer.Option(None, "--mount", help="Nodo donde se monta la aplicación."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Escribe el handoff JSON en este fichero."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Sin banner ni resumen."),
) -> None:
    """Ejecuta el bootstrap una vez."""

    overrides = {
        "map_document_url": map_url,
        "map_image_url": map_image_url,
        "assets_dir": assets_dir,
        "mount_target": mount,
    }
    settings = AppSettings(**{k: v for k, v in overrides.items() if v is not None})

    if not quiet:
        print_banner(_console)

    outcome = asyncio.run(
        bootstrap_application(
            settings=settings,
            application=JsonHandoffApplication(output_path=output),
            diagnostics=ConsoleDiagnosticSink(_console),
        )
    )
    if not outcome.ok:
        raise typer.Exit(code=1)

    if not quiet and outcome.payload is not None:
        _console.print(build_payload_table(outcome.payload))
        if output is not None:
            _console.print(f"[green]Handoff escrito en:[/green] {output}")


@app.command(name="setup")
def setup_command() -> None:
    """Guarda URLs y nodo de montaje en el .env del usuario."""

    settings = AppSettings()
    map_url = typer.prompt("Map document URL", default=settings.map_document_url).strip()
    image_url = typer.prompt("Map image URL", default=settings.map_image_url).strip()
    mount = typer.prompt("Mount target", default=settings.mount_target).strip()

    if not map_url or not image_url or not mount:
        raise typer.BadParameter("map URL, image URL and mount target are required")

    env_path = write_user_env_vars(
        {
            "MAP_BOOT_MAP_DOCUMENT_URL": map_url,
            "MAP_BOOT_MAP_IMAGE_URL": image_url,
            "MAP_BOOT_MOUNT_TARGET": mount,
        }
    )
    _console.print(f"[green]Saved config to:[/green] {env_path}")


def run() -> None:
    app()

"""Sink de diagnóstico sobre Rich.

Por qué Rich:
- Es la misma consola que usa la CLI, así que los fallos del bootstrap se ven
  con el mismo formato que el resto de mensajes.
- Escribe a stderr: stdout queda libre para el handoff JSON.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class ConsoleDiagnosticSink:
    """Implementa `DiagnosticSink` imprimiendo el error (y su causa) en stderr."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def report(self, error: Exception) -> None:
        self._console.print(f"[red]Bootstrap failed:[/red] {escape(str(error))}")
        cause = error.__cause__
        if cause is not None:
            self._console.print(f"[dim]caused by {type(cause).__name__}: {escape(str(cause))}[/dim]")

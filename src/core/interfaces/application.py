"""Contratos del borde con la aplicación.

Por qué Protocol:
- La aplicación es un runtime externo y opaco: solo dependemos de `initialize`.
- El sink de diagnóstico se inyecta para poder observar qué se reporta en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import InitializationPayload


@runtime_checkable
class ApplicationEntryPoint(Protocol):
    """Punto de entrada de la aplicación que se inicializa.

    Reglas de diseño:
    - Se invoca como mucho una vez, y solo con un payload completo.
    - El orquestador no observa nada de la aplicación después del handoff.
    """

    def initialize(self, mount_target: str, payload: InitializationPayload) -> None:
        ...


@runtime_checkable
class DiagnosticSink(Protocol):
    """Destino de diagnóstico del proceso (solo se escribe en el camino de fallo)."""

    def report(self, error: Exception) -> None:
        ...

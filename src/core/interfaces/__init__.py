"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.application import ApplicationEntryPoint, DiagnosticSink
from core.interfaces.fetcher import ResourceFetcher

__all__ = [
    "ApplicationEntryPoint",
    "DiagnosticSink",
    "ResourceFetcher",
]

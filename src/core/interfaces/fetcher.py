"""Contrato de descarga de recursos de red."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import NetworkResource


@runtime_checkable
class ResourceFetcher(Protocol):
    """Descarga el cuerpo completo de un `NetworkResource` como texto.

    Cualquier fallo (conexión, status no-2xx, respuesta malformada como un
    `Content-Encoding` corrupto) se levanta como
    `core.domain.errors.ResourceFetchError`.

    Bytes que no son UTF-8 válido no son un fallo: se sustituyen por U+FFFD.
    """

    async def fetch_text(self, resource: NetworkResource) -> str:
        ...

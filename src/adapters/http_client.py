"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout y headers de la descarga del mapa.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
- Traduce cualquier error de httpx a `ResourceFetchError` (un único tipo de fallo).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.errors import ResourceFetchError
from core.domain.models import NetworkResource


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del bootstrap.

    Nota: `http_timeout_seconds=None` desactiva el timeout; una descarga que no
    termina bloquea el bootstrap indefinidamente.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpResourceFetcher:
    """Implementa `ResourceFetcher` con un único GET por recurso, sin reintentos."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_text(self, resource: NetworkResource) -> str:
        url = resource.location
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return resp.text
        except httpx.HTTPStatusError as exc:
            raise ResourceFetchError(
                f"HTTP {exc.response.status_code} for GET {exc.request.url}",
                resource=resource.name,
                url=url,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ResourceFetchError(
                f"{type(exc).__name__}: {exc}",
                resource=resource.name,
                url=url,
            ) from exc
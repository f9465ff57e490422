"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True` garantiza que referencias y payload no se muten tras crearse.

Nota:
- Estos modelos describen *qué* se entrega a la aplicación, no *cómo* se obtiene.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ResourceReference(BaseModel):
    """Identificador + ubicación ya resuelta de un recurso."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Nombre lógico del recurso (p.ej. 'pink', 'map1_tmx').",
    )
    location: str = Field(
        ...,
        min_length=1,
        description="URL o ruta local resuelta.",
    )


class NetworkResource(ResourceReference):
    """Recurso que hay que descargar en runtime (HTTP GET)."""


class BundledResource(ResourceReference):
    """Asset empaquetado con el programa; ya resuelto, sin I/O."""


class ResourceManifest(BaseModel):
    """Conjunto fijo de recursos que necesita la aplicación.

    Por qué un modelo y no constantes:
    - Las ubicaciones vienen de `AppSettings`, así que el manifest se construye
      en el borde y el orquestador solo lo consume.
    """

    model_config = ConfigDict(frozen=True)

    pink: BundledResource
    red: BundledResource
    map_image_url: str = Field(..., min_length=1)
    map_document: NetworkResource

    def bundled_resources(self) -> tuple[BundledResource, ...]:
        return (self.pink, self.red)

    def network_resources(self) -> tuple[NetworkResource, ...]:
        return (self.map_document,)


class InitializationPayload(BaseModel):
    """Flags iniciales que recibe la aplicación (una sola vez).

    Los alias son los nombres que ve el runtime de la aplicación.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    pink: str = Field(
        ...,
        min_length=1,
        description="Ubicación del asset de la variante rosa.",
    )
    red: str = Field(
        ...,
        min_length=1,
        description="Ubicación del asset de la variante roja.",
    )
    map1_png: str = Field(
        ...,
        min_length=1,
        alias="map1Png",
        description="URL de la imagen del mapa (no se descarga).",
    )
    map1_tmx: str = Field(
        ...,
        alias="map1Tmx",
        description="Contenido textual del documento del mapa; vacío es válido.",
    )

    @classmethod
    def from_resolved(
        cls,
        *,
        manifest: ResourceManifest,
        bundled: dict[str, str],
        documents: dict[str, str],
    ) -> InitializationPayload:
        return cls(
            pink=bundled[manifest.pink.name],
            red=bundled[manifest.red.name],
            map1_png=manifest.map_image_url,
            map1_tmx=documents[manifest.map_document.name],
        )

    def to_flags(self) -> dict[str, Any]:
        """Mapping con los nombres que espera la aplicación."""

        return self.model_dump(by_alias=True)


class BootstrapState(str, Enum):
    PENDING = "pending"
    FETCHING = "fetching"
    INITIALIZED = "initialized"
    FAILED = "failed"


class InitializationOutcome(BaseModel):
    """Resultado del bootstrap: payload entregado o error observado."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    state: BootstrapState
    payload: InitializationPayload | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.state is BootstrapState.INITIALIZED

    @classmethod
    def initialized(cls, payload: InitializationPayload) -> InitializationOutcome:
        return cls(state=BootstrapState.INITIALIZED, payload=payload)

    @classmethod
    def failed(cls, error: Exception) -> InitializationOutcome:
        return cls(state=BootstrapState.FAILED, error=error)

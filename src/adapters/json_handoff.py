"""Handoff JSON hacia el runtime de la aplicación.

Por qué JSON:
- La aplicación es un runtime externo (no Python); JSON es el formato neutro
  para entregarle el nodo de montaje y los flags iniciales.
- Permite inspeccionar el payload entregado sin depender del runtime.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, TextIO

from core.domain.models import InitializationPayload


def handoff_document(*, mount_target: str, payload: InitializationPayload) -> dict[str, Any]:
    return {"node": mount_target, "flags": payload.to_flags()}


class JsonHandoffApplication:
    """Implementa `ApplicationEntryPoint` volcando el handoff como JSON.

    Destino:
    - `output_path` si se indica (se crea el directorio padre).
    - si no, `stream` (stdout por defecto).
    """

    def __init__(self, *, output_path: Path | None = None, stream: TextIO | None = None) -> None:
        self._output_path = output_path
        self._stream = stream

    def initialize(self, mount_target: str, payload: InitializationPayload) -> None:
        text = json.dumps(
            handoff_document(mount_target=mount_target, payload=payload),
            ensure_ascii=False,
            indent=2,
            sort_keys=True,
        ) + "\n"

        if self._output_path is not None:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(text, encoding="utf-8")
            return

        stream = self._stream or sys.stdout
        stream.write(text)
        stream.flush()

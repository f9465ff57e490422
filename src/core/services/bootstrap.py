"""Bootstrap orchestration.

This module owns the whole resource-acquisition-and-handoff sequence:
bundled assets are resolved first, every network resource is fetched
concurrently, and only when all of them settle successfully is the
application initialized, exactly once. Any fetch failure is reported to the
diagnostic sink and the application is never started.

Printing, progress and process exit codes stay in the CLI layer.
"""

from __future__ import annotations

import asyncio

from core.domain.errors import ResourceFetchError
from core.domain.models import (
    BootstrapState,
    InitializationOutcome,
    InitializationPayload,
    ResourceManifest,
)
from core.interfaces.application import ApplicationEntryPoint, DiagnosticSink
from core.interfaces.fetcher import ResourceFetcher


class BootstrapOrchestrator:
    """Runs the bootstrap sequence once.

    States: pending -> fetching -> initialized | failed. Both terminal states
    are final; a second `run()` raises `RuntimeError`.
    """

    def __init__(
        self,
        *,
        manifest: ResourceManifest,
        application: ApplicationEntryPoint,
        diagnostics: DiagnosticSink,
        fetcher: ResourceFetcher,
        mount_target: str,
    ) -> None:
        self._manifest = manifest
        self._application = application
        self._diagnostics = diagnostics
        self._fetcher = fetcher
        self._mount_target = mount_target
        self._state = BootstrapState.PENDING

    @property
    def state(self) -> BootstrapState:
        return self._state

    async def run(self) -> InitializationOutcome:
        if self._state is not BootstrapState.PENDING:
            raise RuntimeError(f"bootstrap already ran (state={self._state.value})")

        bundled = {res.name: res.location for res in self._manifest.bundled_resources()}

        self._state = BootstrapState.FETCHING
        network = self._manifest.network_resources()
        tasks = [asyncio.ensure_future(self._fetcher.fetch_text(res)) for res in network]
        try:
            texts = await asyncio.gather(*tasks)
        except ResourceFetchError as exc:
            # First failure wins; fetches still in flight are discarded.
            for task in tasks:
                task.cancel()
            self._state = BootstrapState.FAILED
            self._diagnostics.report(exc)
            return InitializationOutcome.failed(exc)

        documents = {res.name: text for res, text in zip(network, texts)}
        payload = InitializationPayload.from_resolved(
            manifest=self._manifest,
            bundled=bundled,
            documents=documents,
        )

        self._state = BootstrapState.INITIALIZED
        self._application.initialize(self._mount_target, payload)
        return InitializationOutcome.initialized(payload)

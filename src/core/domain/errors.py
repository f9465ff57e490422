from __future__ import annotations


class BootstrapError(Exception):
    """Base exception for this project."""


class ResourceFetchError(BootstrapError):
    """A network resource could not be fetched (connection, status or body)."""

    def __init__(self, message: str, *, resource: str, url: str):
        super().__init__(f"{resource} ({url}): {message}")
        self.resource = resource
        self.url = url

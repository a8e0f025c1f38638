from __future__ import annotations

from pathlib import Path


class SitemapError(Exception):
    """Base class for failures raised while writing sitemap files."""


class DirectoryCreationError(SitemapError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"could not create output directory {path}: {reason}")


class FileWriteError(SitemapError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"could not write {path.name}: {reason}")


class EntryRenderError(SitemapError):
    def __init__(self, path: Path, location: str, reason: str) -> None:
        self.path = path
        self.location = location
        super().__init__(f"could not render {path.name}: entry {location!r}: {reason}")


class InvalidEntryError(ValueError):
    """A URL entry holds text that cannot be serialized as XML."""

    def __init__(self, location: str, reason: str) -> None:
        self.location = location
        self.reason = reason
        super().__init__(f"entry {location!r}: {reason}")

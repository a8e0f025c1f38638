"""XML sitemap, sitemap index and stylesheet generation."""

from __future__ import annotations

from .builder import (
    DATE_FORMAT,
    INDEX_FILENAME,
    MAX_URLS_PER_FILE,
    SITEMAP_FILENAME,
    SITEMAP_NS,
    STYLESHEET_NAME,
    XHTML_NS,
    SitemapBuilder,
)
from .errors import (
    DirectoryCreationError,
    EntryRenderError,
    FileWriteError,
    InvalidEntryError,
    SitemapError,
)
from .models import CHANGE_FREQUENCIES, AlternateLink, URLEntry

__all__ = [
    "CHANGE_FREQUENCIES",
    "DATE_FORMAT",
    "INDEX_FILENAME",
    "MAX_URLS_PER_FILE",
    "SITEMAP_FILENAME",
    "SITEMAP_NS",
    "STYLESHEET_NAME",
    "XHTML_NS",
    "AlternateLink",
    "DirectoryCreationError",
    "EntryRenderError",
    "FileWriteError",
    "InvalidEntryError",
    "SitemapBuilder",
    "SitemapError",
    "URLEntry",
]

"""
Sitemap builder: partitions URL entries into sitemap files and writes them
together with an optional sitemap index and the companion stylesheet.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import date, datetime
from pathlib import Path
from urllib.parse import urlparse

from lxml import etree

from .errors import DirectoryCreationError, EntryRenderError, FileWriteError, InvalidEntryError
from .models import URLEntry
from .stylesheet import SITEMAP_XSL

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"
MAX_URLS_PER_FILE = 50000
DATE_FORMAT = "%Y-%m-%d"
STYLESHEET_NAME = "sitemap.xsl"
SITEMAP_FILENAME = "sitemap.xml"
INDEX_FILENAME = "sitemap_index.xml"
PAGE_FILENAME = "sitemap_{}.xml"
LASTMOD_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def split_chunks(items: list[URLEntry], size: int) -> list[list[URLEntry]]:
    return [items[i : i + size] for i in range(0, len(items), size)]


def resolve_location(location: str, site_url: str) -> str:
    value = location.strip()
    if urlparse(value).scheme:
        return value
    return f"{site_url.rstrip('/')}/{value.lstrip('/')}"


def normalize_lastmod(raw: str, today: date) -> str:
    value = raw or ""
    if not LASTMOD_RE.fullmatch(value):
        return today.strftime(DATE_FORMAT)
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return today.strftime(DATE_FORMAT)
    return value


def _qname(namespace: str, name: str) -> str:
    return f"{{{namespace}}}{name}"


def _add_text(parent: etree._Element, name: str, text: str) -> None:
    node = etree.SubElement(parent, _qname(SITEMAP_NS, name))
    node.text = text


def _attach_stylesheet(root: etree._Element) -> None:
    root.addprevious(etree.ProcessingInstruction("xml-stylesheet", f'type="text/xsl" href="{STYLESHEET_NAME}"'))


def _add_url(root: etree._Element, entry: URLEntry, site_url: str, today: date) -> None:
    url_node = etree.SubElement(root, _qname(SITEMAP_NS, "url"))
    _add_text(url_node, "loc", resolve_location(entry.location, site_url))
    _add_text(url_node, "lastmod", normalize_lastmod(entry.last_modified, today))
    if entry.change_frequency:
        _add_text(url_node, "changefreq", entry.change_frequency)
    if entry.priority:
        _add_text(url_node, "priority", entry.priority)
    for alternate in entry.alternates:
        link = etree.SubElement(url_node, _qname(XHTML_NS, "link"))
        link.set("rel", "alternate")
        link.set("hreflang", alternate.language_tag)
        link.set("href", alternate.target_href)


def build_urlset(entries: list[URLEntry], site_url: str, today: date) -> etree._Element:
    nsmap = {None: SITEMAP_NS}
    if any(entry.alternates for entry in entries):
        nsmap["xhtml"] = XHTML_NS
    root = etree.Element(_qname(SITEMAP_NS, "urlset"), nsmap=nsmap)
    _attach_stylesheet(root)
    for entry in entries:
        try:
            _add_url(root, entry, site_url, today)
        except ValueError as exc:
            raise InvalidEntryError(entry.location, str(exc)) from exc
    return root


def build_index(locations: list[str], today: date) -> etree._Element:
    root = etree.Element(_qname(SITEMAP_NS, "sitemapindex"), nsmap={None: SITEMAP_NS})
    _attach_stylesheet(root)
    lastmod = today.strftime(DATE_FORMAT)
    for loc in locations:
        sitemap_node = etree.SubElement(root, _qname(SITEMAP_NS, "sitemap"))
        _add_text(sitemap_node, "loc", loc)
        _add_text(sitemap_node, "lastmod", lastmod)
    return root


def serialize_xml(root: etree._Element) -> bytes:
    return etree.tostring(root.getroottree(), encoding="UTF-8", xml_declaration=True, pretty_print=True)


class SitemapBuilder:
    """Accumulates URL entries for a single generation run.

    Nothing touches the filesystem until :meth:`write`, which produces
    ``sitemap.xml`` (or ``sitemap_N.xml`` pages plus ``sitemap_index.xml``
    once the entries exceed ``max_urls``) and always ``sitemap.xsl``.
    The builder is not meant to be reused after ``write``.
    """

    def __init__(
        self,
        output_dir: str | Path,
        site_url: str,
        *,
        max_urls: int = MAX_URLS_PER_FILE,
        today: Callable[[], date] | None = None,
    ) -> None:
        if max_urls <= 0 or max_urls > MAX_URLS_PER_FILE:
            raise ValueError(f"max_urls must be between 1 and {MAX_URLS_PER_FILE}")
        self.output_dir = Path(output_dir)
        self.site_url = site_url
        self.max_urls = max_urls
        self.today = today or date.today
        self.entries: list[URLEntry] = []

    def add_url(self, entry: URLEntry) -> None:
        self.entries.append(entry)

    def add_urls(self, entries: Iterable[URLEntry]) -> None:
        for entry in entries:
            self.add_url(entry)

    def page_count(self) -> int:
        return len(split_chunks(self.entries, self.max_urls))

    def write(self, public_sitemap_base_url: str) -> list[Path]:
        """Write every sitemap file and return their paths in write order.

        Raises DirectoryCreationError, EntryRenderError or FileWriteError on
        the first failure; files written before it are left in place.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(self.output_dir, exc.strerror or str(exc)) from exc

        today = self.today()
        chunks = split_chunks(self.entries, self.max_urls)
        written: list[Path] = []

        if len(chunks) == 1:
            written.append(self._write_file(SITEMAP_FILENAME, self._render_page(SITEMAP_FILENAME, chunks[0], today)))
        elif len(chunks) > 1:
            base = public_sitemap_base_url.rstrip("/") + "/"
            index_locations: list[str] = []
            for idx, chunk in enumerate(chunks, start=1):
                part_name = PAGE_FILENAME.format(idx)
                written.append(self._write_file(part_name, self._render_page(part_name, chunk, today)))
                index_locations.append(f"{base}{part_name}")
            try:
                index_payload = serialize_xml(build_index(index_locations, today))
            except ValueError as exc:
                raise EntryRenderError(self.output_dir / INDEX_FILENAME, base, str(exc)) from exc
            written.append(self._write_file(INDEX_FILENAME, index_payload))

        written.append(self._write_file(STYLESHEET_NAME, SITEMAP_XSL.encode("utf-8")))
        return written

    def _render_page(self, name: str, entries: list[URLEntry], today: date) -> bytes:
        try:
            return serialize_xml(build_urlset(entries, self.site_url, today))
        except InvalidEntryError as exc:
            raise EntryRenderError(self.output_dir / name, exc.location, exc.reason) from exc

    def _write_file(self, name: str, payload: bytes) -> Path:
        path = self.output_dir / name
        try:
            path.write_bytes(payload)
        except OSError as exc:
            raise FileWriteError(path, exc.strerror or str(exc)) from exc
        return path

"""
Command line entry point: generate sitemaps from a URL list and inspect the output.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from lxml import etree

from .builder import (
    INDEX_FILENAME,
    MAX_URLS_PER_FILE,
    SITEMAP_FILENAME,
    SITEMAP_NS,
    STYLESHEET_NAME,
    XHTML_NS,
    SitemapBuilder,
)
from .errors import SitemapError
from .models import AlternateLink, URLEntry


def load_url_list(path: Path) -> list[URLEntry]:
    entries = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        value = raw.strip()
        if not value or value.startswith("#"):
            continue
        entries.append(URLEntry(location=value))
    return entries


def parse_alternates(raw: Any, position: int) -> list[AlternateLink]:
    if raw is None:
        return []
    if isinstance(raw, dict):
        return [AlternateLink(language_tag=str(tag), target_href=str(href)) for tag, href in raw.items()]
    if isinstance(raw, list):
        links = []
        for item in raw:
            if not isinstance(item, dict) or "hreflang" not in item or "href" not in item:
                raise ValueError(f"Entry {position}: alternates must be objects with 'hreflang' and 'href'")
            links.append(AlternateLink(language_tag=str(item["hreflang"]), target_href=str(item["href"])))
        return links
    raise ValueError(f"Entry {position}: alternates must be a mapping or a list")


def first_value(item: dict[str, Any], *keys: str) -> str:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return str(value)
    return ""


def load_json_entries(path: Path) -> list[URLEntry]:
    raw = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict) and isinstance(raw.get("urls"), list):
        items = raw["urls"]
    elif isinstance(raw, list):
        items = raw
    else:
        raise ValueError("URL file must be a JSON list or {\"urls\": [...]} object")

    entries: list[URLEntry] = []
    for idx, item in enumerate(items, start=1):
        if isinstance(item, str):
            entries.append(URLEntry(location=item))
            continue
        if not isinstance(item, dict):
            raise ValueError(f"Entry {idx}: expected a string or an object")
        location = item.get("loc") or item.get("location")
        if not location:
            raise ValueError(f"Entry {idx}: missing 'loc'")
        entries.append(
            URLEntry(
                location=str(location),
                last_modified=first_value(item, "lastmod", "last_modified"),
                change_frequency=first_value(item, "changefreq", "change_frequency"),
                priority=first_value(item, "priority"),
                alternates=parse_alternates(item.get("alternates"), idx),
            )
        )
    return entries


def load_entries(path_value: str) -> list[URLEntry]:
    path = Path(path_value).resolve()
    if not path.exists():
        raise ValueError(f"URL file not found: {path}")
    if path.suffix.lower() == ".json":
        try:
            return load_json_entries(path)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    return load_url_list(path)


def run_generate(args: argparse.Namespace) -> int:
    if args.max_urls <= 0 or args.max_urls > MAX_URLS_PER_FILE:
        print(f"Error: max-urls must be between 1 and {MAX_URLS_PER_FILE}")
        return 2
    try:
        entries = load_entries(args.urls_file)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2
    if not entries:
        print("Error: urls-file is empty")
        return 2

    for entry in entries:
        if not entry.change_frequency:
            entry.change_frequency = args.default_changefreq
        if not entry.priority:
            entry.priority = args.default_priority

    out_dir = Path(args.output_dir).resolve()
    builder = SitemapBuilder(out_dir, args.site_url, max_urls=args.max_urls)
    builder.add_urls(entries)
    try:
        written = builder.write(args.sitemap_url)
    except SitemapError as exc:
        print(f"Error: {exc}")
        return 1

    page_count = builder.page_count()
    index_path = out_dir / INDEX_FILENAME if page_count > 1 else None
    alternate_count = sum(len(entry.alternates) for entry in entries)

    if args.summary_file:
        summary = {
            "site_url": args.site_url,
            "sitemap_url": args.sitemap_url,
            "total_urls": len(entries),
            "max_urls": args.max_urls,
            "sitemap_files": page_count,
            "alternate_links": alternate_count,
            "index_file": str(index_path) if index_path else None,
            "output_files": [str(path) for path in written],
        }
        Path(args.summary_file).write_text(json.dumps(summary, indent=2), encoding="utf-8")

    print(f"Site URL: {args.site_url}")
    print(f"Total URLs included: {len(entries)}")
    print(f"Sitemap files: {page_count}")
    print(f"Alternate links: {alternate_count}")
    if index_path:
        print(f"Index: {index_path}")
    print(f"Stylesheet: {out_dir / STYLESHEET_NAME}")
    return 0


def localname(tag: str) -> str:
    if "}" in tag:
        return tag.rsplit("}", 1)[-1]
    return tag


def has_stylesheet_reference(tree: etree._ElementTree) -> bool:
    node = tree.getroot().getprevious()
    while node is not None:
        if isinstance(node, etree._ProcessingInstruction) and node.target == "xml-stylesheet":
            if f'href="{STYLESHEET_NAME}"' in (node.text or ""):
                return True
        node = node.getprevious()
    return False


def inspect_output(out_dir: Path) -> dict[str, Any]:
    index_path = out_dir / INDEX_FILENAME
    single_path = out_dir / SITEMAP_FILENAME
    use_index = index_path.exists()
    ignored: list[str] = []
    if use_index and single_path.exists():
        if single_path.stat().st_mtime > index_path.stat().st_mtime:
            use_index = False
            ignored.append(index_path.name)
        else:
            ignored.append(single_path.name)

    if use_index:
        tree = etree.parse(str(index_path))
        if localname(tree.getroot().tag) != "sitemapindex":
            raise ValueError(f"Unsupported root element in {index_path.name}")
        documents = [(index_path, tree)]
        for loc in tree.getroot().iterfind(f"{{{SITEMAP_NS}}}sitemap/{{{SITEMAP_NS}}}loc"):
            name = (loc.text or "").rstrip("/").rsplit("/", 1)[-1]
            page_path = out_dir / name
            if not page_path.exists():
                raise ValueError(f"Index references missing file: {name}")
            documents.append((page_path, etree.parse(str(page_path))))
    elif single_path.exists():
        documents = [(single_path, etree.parse(str(single_path)))]
    else:
        raise ValueError(f"No {SITEMAP_FILENAME} or {INDEX_FILENAME} found in {out_dir}")

    url_count = 0
    alternate_count = 0
    missing_stylesheet: list[str] = []
    page_files: list[str] = []
    for path, tree in documents:
        root = tree.getroot()
        if not has_stylesheet_reference(tree):
            missing_stylesheet.append(path.name)
        if localname(root.tag) != "urlset":
            continue
        page_files.append(path.name)
        url_count += len(root.findall(f"{{{SITEMAP_NS}}}url"))
        alternate_count += len(root.findall(f"{{{SITEMAP_NS}}}url/{{{XHTML_NS}}}link"))

    return {
        "index": use_index,
        "sitemap_files": page_files,
        "url_count": url_count,
        "alternate_links": alternate_count,
        "stylesheet_present": (out_dir / STYLESHEET_NAME).exists(),
        "missing_stylesheet_reference": missing_stylesheet,
        "ignored_stale": ignored,
    }


def run_inspect(args: argparse.Namespace) -> int:
    out_dir = Path(args.output_dir).resolve()
    try:
        result = inspect_output(out_dir)
    except (ValueError, etree.XMLSyntaxError) as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Output directory: {out_dir}")
    print(f"Index: {'yes' if result['index'] else 'no'}")
    print(f"Sitemap files: {len(result['sitemap_files'])}")
    print(f"Total URLs: {result['url_count']}")
    print(f"Alternate links: {result['alternate_links']}")
    print(f"Stylesheet: {'present' if result['stylesheet_present'] else 'missing'}")
    if result["missing_stylesheet_reference"]:
        print(f"Missing stylesheet reference: {', '.join(result['missing_stylesheet_reference'])}")
    if result["ignored_stale"]:
        print(f"Ignored older file: {', '.join(result['ignored_stale'])}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate XML sitemaps with optional hreflang alternates.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_generate = sub.add_parser("generate", help="Generate sitemap XML from a URL list")
    p_generate.add_argument("--site-url", required=True, help="Canonical site root used for relative paths")
    p_generate.add_argument("--sitemap-url", required=True, help="Public URL the output directory is served from")
    p_generate.add_argument("--urls-file", required=True, help="Newline-delimited paths/URLs, or a .json entry list")
    p_generate.add_argument("--default-changefreq", default="weekly", help="changefreq for entries without one")
    p_generate.add_argument("--default-priority", default="0.5", help="priority for entries without one")
    p_generate.add_argument("--max-urls", type=int, default=MAX_URLS_PER_FILE, help="URLs per sitemap file (max 50000)")
    p_generate.add_argument("--output-dir", default="sitemaps")
    p_generate.add_argument("--summary-file", default="", help="Optional path for a JSON run summary")
    p_generate.set_defaults(func=run_generate)

    p_inspect = sub.add_parser("inspect", help="Read back a generated sitemap directory")
    p_inspect.add_argument("--output-dir", default="sitemaps")
    p_inspect.set_defaults(func=run_inspect)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

from dataclasses import dataclass, field

CHANGE_FREQUENCIES = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")


@dataclass
class AlternateLink:
    language_tag: str
    target_href: str


@dataclass
class URLEntry:
    """One <url> record.

    ``change_frequency`` and ``priority`` are passed through as given.
    ``last_modified`` must be YYYY-MM-DD; anything else is replaced with the
    current date when the sitemap is written.
    """

    location: str
    last_modified: str = ""
    change_frequency: str = ""
    priority: str = ""
    alternates: list[AlternateLink] = field(default_factory=list)

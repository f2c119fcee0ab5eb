from __future__ import annotations

import typing as t

from .config import ConfigError
from .menu import FlatEntry, MenuEntry, flatten_menu
from .routes import RoutePattern


class ValidationResult(t.NamedTuple):
    missing: list[FlatEntry]
    routes: list[RoutePattern]

    @property
    def ok(self) -> bool:
        return not self.missing


def is_internal_link(href: object) -> bool:
    # Relative hrefs like "about" count as external and are not checked.
    return isinstance(href, str) and href.startswith("/")


def normalize_href(href: str) -> str:
    if href == "/":
        return href
    return href[:-1] if href.endswith("/") else href


def find_missing(entries: t.Iterable[FlatEntry],
                 routes: t.Sequence[RoutePattern]) -> list[FlatEntry]:
    """Internal entries whose href no route accepts, with the href normalized."""
    missing: list[FlatEntry] = []
    for entry in entries:
        href = entry.get("href")
        if not is_internal_link(href):
            continue
        normalized = normalize_href(t.cast(str, href))
        if not any(route.matches(normalized) for route in routes):
            missing.append(t.cast(FlatEntry, {**entry, "href": normalized}))
    return missing


def validate_menu(menu: t.Iterable[MenuEntry],
                  routes: t.Sequence[RoutePattern]) -> ValidationResult:
    if not routes:
        raise ConfigError("No routes found in src/pages. Did you remove all page files?")
    routes = list(routes)
    return ValidationResult(find_missing(flatten_menu(menu), routes), routes)

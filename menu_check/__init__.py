"""Build-time check that navigation menu links resolve to site pages."""
from __future__ import annotations

from .config import ConfigError, load_menu
from .menu import children_of, entry_label, flatten_menu
from .pages import collect_page_files
from .routes import RoutePattern, compile_route, compile_routes
from .validate import (
    ValidationResult,
    find_missing,
    is_internal_link,
    normalize_href,
    validate_menu,
)

__all__ = [
    "ConfigError",
    "RoutePattern",
    "ValidationResult",
    "children_of",
    "collect_page_files",
    "compile_route",
    "compile_routes",
    "entry_label",
    "find_missing",
    "flatten_menu",
    "is_internal_link",
    "load_menu",
    "normalize_href",
    "validate_menu",
]

"""Check that every internal link in the site menu maps to a page.

Exit codes: 0 all links resolve, 1 some links are dangling,
2 the config or pages are missing.
"""
from __future__ import annotations

import pathlib
import sys

from .config import ConfigError, config_path, load_menu, pages_dir
from .menu import entry_label
from .pages import collect_page_files
from .routes import compile_routes
from .validate import ValidationResult, validate_menu


def run(root: pathlib.Path) -> ValidationResult:
    menu = load_menu(config_path(root))
    pages = pages_dir(root)
    routes = compile_routes(collect_page_files(pages), pages)
    return validate_menu(menu, routes)


def report(result: ValidationResult) -> int:
    if result.ok:
        print("Menu validation passed. All internal links have matching routes.")
        return 0
    print("\nMenu validation failed. The following internal links do not map to a page:",
          file=sys.stderr)
    for entry in result.missing:
        print(f" • {entry_label(entry)} ({entry['href']})", file=sys.stderr)
    print("\nAvailable route patterns:", file=sys.stderr)
    for route in result.routes:
        print(f" - {route.file}", file=sys.stderr)
    return 1


def main(root: pathlib.Path | None = None) -> int:
    root = root or pathlib.Path.cwd()
    try:
        result = run(root)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return report(result)

"""Fixed locations of the site configuration and pages, and menu loading.

Paths are resolved against the site root (the current working directory
when the check runs):
- <root>/frosti.config.yaml holds the menu under ``site.menu``
- <root>/src/pages holds the page templates
"""
from __future__ import annotations

import pathlib
import typing as t

import yaml

if t.TYPE_CHECKING:
    from .menu import MenuEntry

CONFIG_FILENAME = "frosti.config.yaml"
PAGES_SUBDIR = pathlib.Path("src") / "pages"
SUPPORTED_EXTENSIONS = frozenset({".astro", ".md", ".mdx"})


class ConfigError(Exception):
    """Fatal setup problem: missing config, missing pages, or no pages at all."""


def config_path(root: pathlib.Path) -> pathlib.Path:
    return root / CONFIG_FILENAME


def pages_dir(root: pathlib.Path) -> pathlib.Path:
    return root / PAGES_SUBDIR


def load_menu(path: pathlib.Path) -> list[MenuEntry]:
    """Read ``site.menu`` from the YAML config at ``path``.

    A document without a menu yields an empty list.
    """
    if not path.is_file():
        raise ConfigError(f"Cannot find configuration file at {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        return []
    site = data.get("site") or {}
    if not isinstance(site, dict):
        return []
    menu = site.get("menu") or []
    if not isinstance(menu, list):
        return []
    return [entry for entry in menu if isinstance(entry, dict)]

from __future__ import annotations

import pathlib

from .config import SUPPORTED_EXTENSIONS, ConfigError


def collect_page_files(pages_dir: pathlib.Path) -> list[pathlib.Path]:
    """Return every page template under ``pages_dir``, recursively, sorted."""
    if not pages_dir.is_dir():
        raise ConfigError(f"Cannot find pages directory at {pages_dir}")
    return sorted(
        p for p in pages_dir.rglob('*')
        if p.is_file() and p.suffix in SUPPORTED_EXTENSIONS
    )

from __future__ import annotations

import pathlib
import typing as t

import pytest


@pytest.fixture()
def make_site(tmp_path: pathlib.Path) -> t.Callable[..., pathlib.Path]:
    """Build a site root with the given page files and config text."""
    def _make(pages: t.Iterable[str] = (), config: str | None = None) -> pathlib.Path:
        pages_dir = tmp_path / "src" / "pages"
        pages_dir.mkdir(parents=True, exist_ok=True)
        for rel in pages:
            page = pages_dir / rel
            page.parent.mkdir(parents=True, exist_ok=True)
            page.write_text("---\n---\n", encoding="utf-8")
        if config is not None:
            (tmp_path / "frosti.config.yaml").write_text(config, encoding="utf-8")
        return tmp_path
    return _make

"""Translate page file paths into the URL patterns the site router serves.

Rules (file-based routing, relative to the pages root):
- the extension is dropped, and a trailing ``index`` segment answers to its parent
- ``[...name]`` is a catch-all: the rest of the path is optional and unconstrained
- ``[name]`` is a dynamic segment: exactly one non-empty segment without ``/``
- anything else is matched literally
"""
from __future__ import annotations

import os
import posixpath
import re
import typing as t

CATCH_ALL = "(?:/.*)?"
DYNAMIC = "/[^/]+"
ROOT_ONLY = re.compile(r"/")


class RoutePattern(t.NamedTuple):
    file: str
    regex: re.Pattern[str]

    def matches(self, path: str) -> bool:
        return self.regex.fullmatch(path) is not None


def is_catch_all(segment: str) -> bool:
    return segment.startswith("[...") and segment.endswith("]")


def is_dynamic(segment: str) -> bool:
    return segment.startswith("[") and segment.endswith("]")


def relative_page_path(file_path: str | os.PathLike[str],
                       pages_dir: str | os.PathLike[str] | None = None) -> str:
    """Path of the page below the pages root, always ``/``-separated."""
    rel = os.path.relpath(file_path, pages_dir) if pages_dir is not None else os.fspath(file_path)
    return rel.replace("\\", "/")


def split_segments(relative: str) -> list[str]:
    without_ext, _ = posixpath.splitext(relative)
    segments = without_ext.split("/")
    if segments[-1] == "index":
        segments = segments[:-1]
    return segments


def segment_pattern(segment: str) -> str:
    if is_catch_all(segment):
        return CATCH_ALL
    if is_dynamic(segment):
        return DYNAMIC
    return "/" + re.escape(segment)


def compile_segments(segments: t.Sequence[str]) -> re.Pattern[str]:
    if not segments:
        return ROOT_ONLY
    return re.compile("".join(segment_pattern(s) for s in segments))


def compile_route(file_path: str | os.PathLike[str],
                  pages_dir: str | os.PathLike[str] | None = None) -> RoutePattern:
    relative = relative_page_path(file_path, pages_dir)
    return RoutePattern(relative, compile_segments(split_segments(relative)))


def compile_routes(files: t.Iterable[str | os.PathLike[str]],
                   pages_dir: str | os.PathLike[str] | None = None) -> list[RoutePattern]:
    return [compile_route(f, pages_dir) for f in files]

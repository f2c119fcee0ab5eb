from __future__ import annotations

import pytest

from menu_check.routes import compile_route, compile_routes, split_segments


@pytest.mark.parametrize(
    "page, path",
    [
        ("index.astro", "/"),
        ("about.astro", "/about"),
        ("about/index.md", "/about"),
        ("blog/index.astro", "/blog"),
        ("docs/guide/setup.mdx", "/docs/guide/setup"),
        ("blog/[slug].astro", "/blog/hello-world"),
        ("[lang]/index.astro", "/en"),
        ("docs/[...rest].astro", "/docs"),
        ("docs/[...rest].astro", "/docs/a"),
        ("docs/[...rest].astro", "/docs/a/b/c"),
        ("a.b.astro", "/a.b"),
    ],
)
def test_route_matches(page: str, path: str) -> None:
    assert compile_route(page).matches(path)


@pytest.mark.parametrize(
    "page, path",
    [
        ("index.astro", ""),
        ("index.astro", "/index"),
        ("about.astro", "/about/"),
        ("about.astro", "/about/team"),
        ("about.astro", "/prefix/about"),
        ("about.astro", "/about\n"),
        ("blog/[slug].astro", "/blog"),
        ("blog/[slug].astro", "/blog/"),
        ("blog/[slug].astro", "/blog/a/b"),
        ("docs/[...rest].astro", "/x"),
        ("docs/[...rest].astro", "/docsx"),
        ("a.b.astro", "/aXb"),
    ],
)
def test_route_rejects(page: str, path: str) -> None:
    assert not compile_route(page).matches(path)


def test_index_also_matches_parent_path() -> None:
    for page, parent in [("index.astro", "/"), ("blog/index.astro", "/blog"),
                         ("a/b/index.md", "/a/b")]:
        assert compile_route(page).matches(parent)


@pytest.mark.parametrize("name", ["a+b", "a(b)", "a|b", "a^b$", "a{2}", "a?", "a*", "[x"])
def test_metacharacters_are_literal(name: str) -> None:
    route = compile_route(f"{name}.astro")
    assert route.matches(f"/{name}")
    assert not route.matches("/a")


def test_malformed_brackets_are_literal() -> None:
    route = compile_route("x/[slug.astro")
    assert route.matches("/x/[slug")
    assert not route.matches("/x/anything")


def test_catch_all_not_in_last_position() -> None:
    route = compile_route("[...path]/edit.astro")
    assert route.matches("/edit")
    assert route.matches("/a/b/edit")


def test_backslash_separators_are_normalized() -> None:
    route = compile_route("blog\\[slug].astro")
    assert route.file == "blog/[slug].astro"
    assert route.matches("/blog/post")


def test_paths_are_made_relative_to_pages_dir(tmp_path) -> None:
    pages = tmp_path / "src" / "pages"
    routes = compile_routes([pages / "index.astro", pages / "blog" / "[slug].md"], pages)
    assert [r.file for r in routes] == ["index.astro", "blog/[slug].md"]
    assert routes[1].matches("/blog/first")


def test_split_segments() -> None:
    assert split_segments("index.astro") == []
    assert split_segments("blog/index.astro") == ["blog"]
    assert split_segments("blog/[slug].astro") == ["blog", "[slug]"]
    assert split_segments("index/about.md") == ["index", "about"]

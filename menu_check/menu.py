from __future__ import annotations

import typing as t

# Both field names carry children; older configs use one, newer the other.
CHILD_FIELDS = ("subItems", "items")


class MenuEntry(t.TypedDict, total=False):
    id: str
    text: str
    href: str
    subItems: list['MenuEntry']
    items: list['MenuEntry']


class FlatEntry(t.TypedDict, total=False):
    id: str
    text: str
    href: str


def children_of(entry: MenuEntry) -> list[MenuEntry]:
    """Children from every child field, in ``CHILD_FIELDS`` order."""
    children: list[MenuEntry] = []
    for field in CHILD_FIELDS:
        value = entry.get(field)
        if isinstance(value, list):
            children.extend(c for c in value if isinstance(c, dict))
    return children


def flatten_menu(entries: t.Iterable[MenuEntry]) -> list[FlatEntry]:
    """Depth-first pre-order list of every node, without the child fields.

    The tree must be acyclic.
    """
    flat: list[FlatEntry] = []
    stack = list(reversed(list(entries)))
    while stack:
        entry = stack.pop()
        node = t.cast(FlatEntry, {k: v for k, v in entry.items() if k not in CHILD_FIELDS})
        flat.append(node)
        stack.extend(reversed(children_of(entry)))
    return flat


def entry_label(entry: FlatEntry) -> str:
    return str(entry.get("text") or entry.get("id") or entry.get("href") or "")

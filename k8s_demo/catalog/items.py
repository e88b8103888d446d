from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Iterator


_ITEM_ID_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    description: str
    icon: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_ITEMS: tuple[Item, ...] = (
    Item(id=1, name="Kubernetes", description="Container orchestration platform", icon="☸️"),
    Item(id=2, name="Docker", description="Containerization technology", icon="🐳"),
    Item(id=3, name="Node.js", description="JavaScript runtime", icon="💚"),
    Item(id=4, name="React", description="Frontend library", icon="⚛️"),
)


def parse_item_id(raw: str) -> int | None:
    """Parse a path-embedded item id.

    Returns None when the value is not an integer; callers treat that the same
    as an id with no matching item.
    """
    s = raw or ""
    if not _ITEM_ID_RE.match(s):
        return None
    return int(s)


class Catalog:
    """Fixed, ordered collection of items (read-only after construction)."""

    def __init__(self, items: Iterable[Item]) -> None:
        frozen = tuple(items)
        seen: set[int] = set()
        for it in frozen:
            if it.id <= 0:
                raise ValueError(f"Item id must be positive, got {it.id!r}")
            if it.id in seen:
                raise ValueError(f"Duplicate item id: {it.id}")
            if not (it.name or "").strip():
                raise ValueError(f"Item {it.id} has an empty name")
            seen.add(it.id)
        self._items = frozen
        self._by_id = {it.id: it for it in frozen}

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def get(self, item_id: int | None) -> Item | None:
        if item_id is None:
            return None
        return self._by_id.get(item_id)


def default_catalog() -> Catalog:
    return Catalog(DEFAULT_ITEMS)

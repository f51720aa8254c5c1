"""A read-only view of a JSON object with some of its keys hidden."""

from __future__ import annotations

import json
from collections.abc import ItemsView, Iterable, Iterator, Mapping
from typing import Any


class Exclude(Mapping):
    """A view of a JSON object that hides a fixed set of keys.

    Every hidden key must be present in the object. Keys are visited in
    sorted order, the order in which JSON objects are kept by key.
    """

    __slots__ = ("_object", "_excluded")

    def __init__(self, obj: Mapping[str, Any], excluded: Iterable[str]) -> None:
        self._object = obj
        self._excluded = frozenset(excluded)
        missing = sorted(key for key in self._excluded if key not in obj)
        if missing:
            raise ValueError(
                f"all excluded keys must be initially present; missing: {missing}"
            )

    @property
    def excluded(self) -> frozenset[str]:
        """The keys hidden by this view."""
        return self._excluded

    def __iter__(self) -> Iterator[str]:
        return (key for key in sorted(self._object) if key not in self._excluded)

    def items(self) -> ItemsView:
        """The visible (key, value) pairs."""
        return ItemsView(self)

    def __getitem__(self, key: str) -> Any:
        if key in self._excluded:
            raise KeyError(key)
        return self._object[key]

    def __contains__(self, key: object) -> bool:
        return key not in self._excluded and key in self._object

    def get(self, key: str, default: Any = None) -> Any:
        """The value under a visible key, or ``default``."""
        if key in self:
            return self._object[key]
        return default

    def get_key_value(self, key: str) -> tuple[str, Any] | None:
        """The pair stored under a visible key, or None."""
        if key in self:
            return key, self._object[key]
        return None

    def __len__(self) -> int:
        return len(self._object) - len(self._excluded)

    def is_empty(self) -> bool:
        """Whether no key is visible."""
        return len(self) == 0

    def to_json(self, pretty: bool = False) -> str:
        """Serialise the visible part of the object as JSON text."""
        visible = dict(self.items())
        if pretty:
            return json.dumps(visible, ensure_ascii=False, sort_keys=True, indent=2)
        return json.dumps(
            visible, ensure_ascii=False, sort_keys=True, separators=(",", ":")
        )

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"Exclude({dict(self._object)!r}, excluded={sorted(self._excluded)!r})"
"""Read-only, failure-as-absence view over a decoded response document.

YouTube Music responses are deeply nested JSON with no schema contract.
``Node`` wraps any decoded value and makes every lookup an attempt: a
missing key, an out-of-range index or a value of the wrong shape yields an
absent node instead of an exception, so extraction code is a short chain of
lookups that naturally short-circuits.

Examples:
    >>> doc = Node({"title": {"runs": [{"text": "Hello"}]}})
    >>> doc["title"]["runs"][0]["text"].as_str()
    'Hello'
    >>> doc.path("header", "missing", 3).present
    False
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

__all__ = ["MISSING", "Document", "Node"]


class Node:
    """A single position in a document tree.

    The wrapped value is never copied or mutated. Absent nodes wrap ``None``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = value.value if isinstance(value, Node) else value

    def __repr__(self) -> str:
        return f"Node({self._value!r})"

    def __bool__(self) -> bool:
        return self._value is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: str | int) -> Node:
        value = self._value
        if isinstance(key, str):
            if isinstance(value, Mapping):
                return Node(value.get(key))
            return MISSING
        if isinstance(value, Sequence) and not isinstance(value, str | bytes):
            try:
                return Node(value[key])
            except IndexError:
                return MISSING
        return MISSING

    def get(self, key: str | int) -> Node:
        """Alias of ``node[key]`` for readability in long chains."""
        return self[key]

    def path(self, *keys: str | int) -> Node:
        """Follow a sequence of keys and indexes, stopping at the first miss."""
        node = self
        for key in keys:
            node = node[key]
            if node._value is None:
                return MISSING
        return node

    @property
    def value(self) -> Any:
        """The raw wrapped value (``None`` when absent)."""
        return self._value

    @property
    def present(self) -> bool:
        return self._value is not None

    def as_str(self) -> str | None:
        return self._value if isinstance(self._value, str) else None

    def as_bool(self) -> bool | None:
        return self._value if isinstance(self._value, bool) else None

    def as_int(self) -> int | None:
        # bool is an int subclass; a flag is never a count
        if isinstance(self._value, int) and not isinstance(self._value, bool):
            return self._value
        return None

    def as_float(self) -> float | None:
        if isinstance(self._value, int | float) and not isinstance(self._value, bool):
            return float(self._value)
        return None

    def as_list(self) -> list[Any] | None:
        return self._value if isinstance(self._value, list) else None

    def as_dict(self) -> dict[str, Any] | None:
        return self._value if isinstance(self._value, dict) else None

    def items(self) -> Iterator[Node]:
        """Iterate over the children of a list node (nothing if not a list)."""
        if isinstance(self._value, list):
            for item in self._value:
                yield Node(item)

    def keys(self) -> list[str]:
        """Keys of a mapping node, empty for anything else."""
        if isinstance(self._value, Mapping):
            return [key for key in self._value if isinstance(key, str)]
        return []

    def __len__(self) -> int:
        if isinstance(self._value, list | Mapping):
            return len(self._value)
        return 0


MISSING = Node(None)

Document = Node | Mapping[str, Any]
"""Anything a parser accepts: a decoded response or a node inside one."""

"""Read-only key/value tree used for Steam product info ("appinfo").

Product info is a nested document of named nodes. Leaves carry string values
and branches carry an ordered list of children; child names may repeat.

Lookups never raise on a missing path. Indexing a node with an unknown name
returns the shared ``MISSING`` node, which is itself indexable, so chains like
``info["common"]["playareavr"]["seated"]`` are always safe. The ``get`` and
``find`` helpers return ``None`` instead for option-style access.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class KeyValue:
    """A node in a product info tree.

    Attributes:
        name: Node name, or None for the missing node
        value: String value for leaves, None for branches and missing nodes
        children: Child nodes in document order
    """

    __slots__ = ("name", "value", "children")

    def __init__(
        self,
        name: str | None,
        value: str | None = None,
        children: tuple[KeyValue, ...] | list[KeyValue] = (),
    ) -> None:
        self.name = name
        self.value = value
        self.children = tuple(children)

    @property
    def exists(self) -> bool:
        """Whether this node was present in the source document."""
        return self.name is not None

    def __bool__(self) -> bool:
        return self.exists

    def __getitem__(self, name: str) -> KeyValue:
        # Child names are matched case-insensitively, as in Steam's text KV format
        lowered = name.lower()
        for child in self.children:
            if child.name is not None and child.name.lower() == lowered:
                return child
        return MISSING

    def __iter__(self) -> Iterator[KeyValue]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        if not self.exists:
            return "KeyValue(<missing>)"
        if self.children:
            return f"KeyValue({self.name!r}, children={len(self.children)})"
        return f"KeyValue({self.name!r}, {self.value!r})"

    def find(self, *path: str) -> KeyValue | None:
        """Walk a path of child names.

        Returns:
            The node at the end of the path, or None if any step is missing
        """
        node: KeyValue = self
        for name in path:
            node = node[name]
        return node if node.exists else None

    def get(self, *path: str, default: str | None = None) -> str | None:
        """Get the string value at the end of a path.

        Returns:
            The value, or ``default`` if the node is missing or has no value
        """
        node = self.find(*path)
        if node is None or node.value is None:
            return default
        return node.value

    def to_dict(self) -> dict[str, Any]:
        """Convert the children of this node to nested dictionaries.

        Repeated names keep the last occurrence.
        """
        result: dict[str, Any] = {}
        for child in self.children:
            if child.name is None:
                continue
            result[child.name] = child.to_dict() if child.children else child.value
        return result

    @classmethod
    def from_dict(cls, name: str, data: Any) -> KeyValue:
        """Build a tree from decoded JSON.

        Mappings become branches, lists become branches whose children are
        named by index, scalars become string leaves.

        Args:
            name: Name of the root node
            data: Decoded JSON value

        Returns:
            The root node
        """
        if isinstance(data, Mapping):
            return cls(name, children=[cls.from_dict(str(k), v) for k, v in data.items()])
        if isinstance(data, list):
            return cls(name, children=[cls.from_dict(str(i), v) for i, v in enumerate(data)])
        if data is None:
            return cls(name)
        if isinstance(data, bool):
            return cls(name, "1" if data else "0")
        return cls(name, str(data))


MISSING = KeyValue(None)

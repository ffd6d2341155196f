"""A flat, id-indexed tree of files and directories with aggregated sizes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Node:
    """One file or directory in the tree."""

    id: int = 0
    size: int = 0
    name: str = ""
    path: Path = field(default_factory=Path)
    depth: int = 0
    is_file: bool = False
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class Tree:
    """Nodes stored by id; node 0 is the root. Sizes roll up to ancestors."""

    def __init__(self, root_name: str = "") -> None:
        self.elems: list[Node] = [Node(name=root_name, path=Path(root_name))]
        self.last_id = 0

    def _propagate_child_size(self, node_id: int, size: int, negative: bool) -> None:
        parent = self.elems[node_id].parent
        while parent is not None:
            if negative:
                self.elems[parent].size -= size
            else:
                self.elems[parent].size += size
            parent = self.elems[parent].parent

    def add_elem(self, parent: int, name: str, path, is_file: bool, size: int) -> int:
        """Add a node under ``parent`` and return its id."""
        parent_node = self.elems[parent]
        self.last_id += 1
        node = Node(
            id=self.last_id,
            size=size,
            name=name,
            path=Path(path),
            depth=parent_node.depth + 1,
            is_file=is_file,
            parent=parent,
        )
        parent_node.children.append(self.last_id)
        self.elems.append(node)
        self._propagate_child_size(self.last_id, size, negative=False)
        return self.last_id

    def invalidate_elem(self, node_id: int) -> None:
        """Detach a node from its parent and subtract its size from ancestors."""
        node = self.elems[node_id]
        if node.parent is not None:
            siblings = self.elems[node.parent].children
            if node_id in siblings:
                siblings.remove(node_id)
        self._propagate_child_size(node_id, node.size, negative=True)

    def get_elem(self, node_id: int) -> Node:
        return self.elems[node_id]

    def set_root(self, root_name: str) -> None:
        """Drop every node and start over with a fresh root."""
        self.clear()
        self.elems.append(Node(name=root_name))

    def clear(self) -> None:
        self.elems = []
        self.last_id = 0

    def __len__(self) -> int:
        return len(self.elems)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.elems)
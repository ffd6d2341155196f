"""Treemap layout: nested rectangles for the nodes of a file tree."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter

from .filetree import Node, Tree

MAX_FS_DEPTH = 16
MIN_BOX_SIZE = 20.0
PAD = 1.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains_point(self, x: float, y: float) -> bool:
        """Whether the point lies inside the rectangle or on its edge."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height

    def _padded(self, pad: float) -> Rect:
        return Rect(self.x + pad, self.y + pad, self.width - 2.0 * pad, self.height - 2.0 * pad)


@dataclass(frozen=True)
class GUINode:
    rect: Rect
    node_id: int


def compute_gui_nodes(tree: Tree, root: Node, bound: Rect, text_offset: float) -> dict[int, GUINode]:
    """Lay out ``root`` and its descendants inside ``bound``, keyed by node id."""
    out: list[GUINode] = []
    _compute(tree, [root], bound, 0, text_offset, out)
    return {gui_node.node_id: gui_node for gui_node in out}


def _compute(
    tree: Tree,
    nodes: list[Node],
    bound: Rect,
    dir_level: int,
    text_offset: float,
    out: list[GUINode],
) -> None:
    if (
        dir_level > MAX_FS_DEPTH
        or bound.width < MIN_BOX_SIZE
        or bound.height < MIN_BOX_SIZE
        or not nodes
    ):
        return

    # Several nodes form a plain group: recurse without emitting a box for it.
    node_group = len(nodes) > 1
    if node_group:
        children = nodes
        subdir_level = 0
        total_size = sum(n.size for n in nodes)
    else:
        node = nodes[0]
        out.append(GUINode(rect=bound, node_id=node.id))
        children = [tree.get_elem(i) for i in node.children]
        if children:
            bound = Rect(
                bound.x + 3.0,
                bound.y + text_offset,
                bound.width - 6.0,
                bound.height - text_offset - 3.0,
            )
        subdir_level = 1
        total_size = node.size

    if not children or total_size <= 0:
        return

    group_a, bound_a, group_b, bound_b = squarify(children, bound, total_size)
    for group, part in ((group_a, bound_a), (group_b, bound_b)):
        if node_group and len(group) == len(nodes):
            # The split made no progress; stop rather than recurse forever.
            continue
        _compute(tree, group, part, dir_level + subdir_level, text_offset, out)


def squarify(
    nodes: list[Node], bound: Rect, total_size: int
) -> tuple[list[Node], Rect, list[Node], Rect]:
    """Split nodes, sorted by size, into two halves and divide ``bound`` between them."""
    if total_size <= 0:
        raise ValueError(f"total size must be positive: {total_size}")
    ordered = sorted(nodes, key=attrgetter("size"))
    if not ordered:
        raise ValueError("no nodes to lay out")

    half = total_size // 2
    size_a = 0
    split = 0
    for node in ordered:
        if size_a >= half:
            break
        size_a += node.size
        split += 1
    if split == len(ordered):
        split -= 1
        size_a -= ordered[split].size

    group_a, group_b = ordered[:split], ordered[split:]
    ratio = size_a / total_size

    if bound.width > bound.height:
        split_width = bound.width * ratio
        bound_a = Rect(bound.x, bound.y, split_width, bound.height)
        bound_b = Rect(bound.x + split_width, bound.y, bound.width - split_width, bound.height)
    else:
        split_height = bound.height * ratio
        bound_a = Rect(bound.x, bound.y, bound.width, split_height)
        bound_b = Rect(bound.x, bound.y + split_height, bound.width, bound.height - split_height)

    if len(group_a) == 1:
        bound_a = bound_a._padded(PAD)
    if len(group_b) == 1:
        bound_b = bound_b._padded(PAD)

    return group_a, bound_a, group_b, bound_b


def locate_node(
    tree: Tree, node: Node, gui_node_map: dict[int, GUINode], x: float, y: float
) -> Node | None:
    """Return the deepest laid-out node under ``node`` whose box holds the point."""
    gui_node = gui_node_map.get(node.id)
    if gui_node is None:
        return None
    found = node if gui_node.rect.contains_point(x, y) else None
    for child_id in node.children:
        hit = locate_node(tree, tree.get_elem(child_id), gui_node_map, x, y)
        if hit is not None:
            found = hit
    return found
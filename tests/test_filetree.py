from pathlib import Path

import pytest

from spaceman.filetree import Node, Tree


@pytest.fixture
def tree():
    t = Tree("/data")
    docs = t.add_elem(0, "docs", Path("/data/docs"), False, 4096)
    t.add_elem(docs, "a.txt", Path("/data/docs/a.txt"), True, 100)
    t.add_elem(docs, "b.txt", Path("/data/docs/b.txt"), True, 250)
    t.add_elem(0, "c.bin", Path("/data/c.bin"), True, 1000)
    return t


def test_new_tree_has_root_only():
    t = Tree("/root")
    assert len(t) == 1
    root = t.get_elem(0)
    assert root.name == "/root"
    assert root.path == Path("/root")
    assert root.size == 0
    assert root.parent is None
    assert t.last_id == 0


def test_add_elem_returns_sequential_ids(tree):
    assert tree.last_id == 4
    assert [node.id for node in tree] == [0, 1, 2, 3, 4]


def test_sizes_propagate_to_ancestors(tree):
    assert tree.get_elem(1).size == 4096 + 100 + 250
    assert tree.get_elem(0).size == 4096 + 100 + 250 + 1000


def test_depth_and_parent_links(tree):
    assert tree.get_elem(1).depth == 1
    assert tree.get_elem(2).depth == 2
    assert tree.get_elem(2).parent == 1
    assert tree.get_elem(0).children == [1, 4]
    assert tree.get_elem(1).children == [2, 3]


def test_invalidate_elem_detaches_and_subtracts(tree):
    root_before = tree.get_elem(0).size
    tree.invalidate_elem(2)
    assert tree.get_elem(1).children == [3]
    assert tree.get_elem(1).size == 4096 + 250
    assert tree.get_elem(0).size == root_before - 100


def test_invalidate_directory_removes_whole_subtree_size(tree):
    tree.invalidate_elem(1)
    assert tree.get_elem(0).children == [4]
    assert tree.get_elem(0).size == 1000


def test_get_elem_missing_raises(tree):
    with pytest.raises(IndexError):
        tree.get_elem(99)


def test_add_under_missing_parent_raises():
    t = Tree("x")
    with pytest.raises(IndexError):
        t.add_elem(5, "f", Path("x/f"), True, 1)
    assert len(t) == 1


def test_set_root_resets(tree):
    tree.set_root("/other")
    assert len(tree) == 1
    assert tree.last_id == 0
    assert tree.get_elem(0).name == "/other"
    assert tree.add_elem(0, "n", Path("/other/n"), True, 7) == 1
    assert tree.get_elem(0).size == 7


def test_clear_empties_tree(tree):
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []


def test_iteration_yields_nodes(tree):
    names = [node.name for node in tree]
    assert names == ["/data", "docs", "a.txt", "b.txt", "c.bin"]
    assert all(isinstance(node, Node) for node in tree)
"""Background filesystem walk that fills a Tree."""

from __future__ import annotations

import os
import stat
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from pathlib import Path

from .filetree import Tree
from .utils import CHUNK_SIZE


@dataclass(frozen=True)
class Entry:
    """One walked filesystem entry; depth 0 is the walk's root."""

    depth: int
    name: str
    path: Path
    is_file: bool
    size: int


def preliminary_progress_count(directory) -> int:
    """Count the direct entries of ``directory``; raises OSError if unreadable."""
    with os.scandir(directory) as it:
        return sum(1 for _ in it)


def _list_dir(path) -> Iterator[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as err:
        print(f"Can't read: {err}")
        return iter(())
    return iter(entries)


def walk_entries(root) -> Iterator[Entry]:
    """Yield ``root`` and everything below it, depth first, without following links.

    Directories on a different device than ``root`` are listed but not entered.
    """
    root_path = Path(root)
    try:
        root_stat = root_path.stat()
    except OSError as err:
        print(f"Can't read: {err}")
        return
    root_device = root_stat.st_dev if os.name == "posix" else None
    yield Entry(
        depth=0,
        name=root_path.name or str(root_path),
        path=root_path,
        is_file=stat.S_ISREG(root_stat.st_mode),
        size=root_stat.st_size,
    )
    if not stat.S_ISDIR(root_stat.st_mode):
        return

    stack = [_list_dir(root_path)]
    while stack:
        dir_entry = next(stack[-1], None)
        if dir_entry is None:
            stack.pop()
            continue
        depth = len(stack)
        try:
            entry_stat = dir_entry.stat(follow_symlinks=False)
        except OSError as err:
            print(f"Can't get filesize: {err}")
            continue
        mode = entry_stat.st_mode
        yield Entry(
            depth=depth,
            name=dir_entry.name,
            path=Path(dir_entry.path),
            is_file=stat.S_ISREG(mode),
            size=entry_stat.st_size,
        )
        if stat.S_ISDIR(mode) and (root_device is None or entry_stat.st_dev == root_device):
            stack.append(_list_dir(dir_entry.path))


class _TreeBuilder:
    """Attaches depth-first entries to a tree, tracking the last node added."""

    def __init__(self, tree: Tree) -> None:
        self.tree = tree
        self.last_depth = 0
        self.last_node = 0

    def add(self, entry: Entry) -> None:
        tree = self.tree
        if entry.depth > self.last_depth:
            parent = self.last_node
        elif entry.depth == self.last_depth:
            parent = tree.get_elem(self.last_node).parent
        else:
            parent = self.last_node
            for _ in range(entry.depth, self.last_depth + 1):
                up = tree.get_elem(parent).parent
                if up is not None:
                    parent = up
        if parent is not None:
            tree.add_elem(parent, entry.name, entry.path, entry.is_file, entry.size)
        self.last_depth = entry.depth
        self.last_node = tree.last_id


def build_tree(tree: Tree, entries: Iterable[Entry]) -> None:
    """Add depth-first ``entries`` to ``tree``; the depth-0 entry stands for its root."""
    builder = _TreeBuilder(tree)
    for entry in entries:
        builder.add(entry)


class Scan:
    """A directory scan filling ``tree`` from a background thread.

    Hold ``lock`` while reading ``tree``. ``update_signal`` is set whenever new
    nodes arrive and ``complete`` once the walk has ended.
    """

    def __init__(self, directory) -> None:
        self.path = str(directory)
        self.tree = Tree(self.path)
        self.lock = threading.Lock()
        self.update_signal = threading.Event()
        self.update_signal.set()
        self.complete = threading.Event()
        self._terminate = threading.Event()
        self._progress_count = preliminary_progress_count(self.path)
        self._thread = threading.Thread(target=self._walk, daemon=True)
        self._thread.start()

    def _walk(self) -> None:
        with self.lock:
            root_name = self.tree.get_elem(0).name
        entries = walk_entries(root_name)
        builder = _TreeBuilder(self.tree)
        while not self._terminate.is_set():
            chunk = list(islice(entries, CHUNK_SIZE))
            if not chunk:
                break
            with self.lock:
                if self._terminate.is_set():
                    break
                for entry in chunk:
                    builder.add(entry)
            self.update_signal.set()
        self.complete.set()

    def progress(self) -> float:
        """Fraction done: share of top-level entries seen, scaled to 0.9, or 1.0 when done."""
        if self.complete.is_set():
            return 1.0
        if self._progress_count == 0:
            return 0.0
        with self.lock:
            if not len(self.tree):
                return 1.0
            seen = len(self.tree.get_elem(0).children)
        return seen / self._progress_count * 0.9

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the walk to end; return whether it has."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def close(self) -> None:
        """Stop the walk and drop the collected tree."""
        self.complete.set()
        self._terminate.set()
        with self.lock:
            self.tree.clear()

    def __enter__(self) -> Scan:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
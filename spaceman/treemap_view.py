"""Tk widgets showing a scan as a treemap and its progress."""

from __future__ import annotations

import copy
import sys
import tkinter as tk
from tkinter import font as tkfont

from .desktop import open_path, show_in_directory
from .filetree import Node
from .node_color import RGBA, depth_dir_color, depth_file_color
from .squarify import GUINode, Rect, compute_gui_nodes, locate_node
from .utils import abbreviate_string, bytes_display

REFRESH_INTERVAL_MS = 300
_ELLIPSIS = "..."


def node_label(node: Node) -> str:
    """Text shown for a node: its name and human-readable size."""
    return f"{node.name} ({bytes_display(node.size)})"


def color_hex(color: RGBA) -> str:
    """Convert a 0..1 RGBA colour to a Tk ``#rrggbb`` string (alpha ignored)."""
    channels = (color.red, color.green, color.blue)
    return "#" + "".join(f"{max(0, min(255, round(c * 255))):02x}" for c in channels)


class TreeMapView(tk.Canvas):
    """Canvas drawing the tree of a scan as nested boxes."""

    def __init__(self, master, on_trash=None) -> None:
        super().__init__(master, width=100, height=100, highlightthickness=0, background="white")
        self._on_trash = on_trash
        self._scan = None
        self._gui_nodes: dict[int, GUINode] = {}
        self._invalidate = False
        self._last_size = (0, 0)
        self._font = tkfont.nametofont("TkDefaultFont")
        self._tooltip = tk.Label(self, background="#ffffe0", relief="solid", borderwidth=1)
        self._menu = tk.Menu(self, tearoff=False)

        self.bind("<Configure>", lambda _event: self.redraw())
        self.bind("<Motion>", self._on_motion)
        self.bind("<Leave>", lambda _event: self._tooltip.place_forget())
        self.bind("<Button-3>", self._on_context_click)
        if sys.platform == "darwin":
            self.bind("<Button-2>", self._on_context_click)
        self.after(REFRESH_INTERVAL_MS, self._tick)

    def current_scan(self):
        return self._scan

    def replace_scan(self, scan) -> None:
        self._scan = scan
        self._gui_nodes = {}
        self._invalidate = True
        self.redraw()

    def deletion_notice(self, node_id: int) -> None:
        """Drop a node removed from disk and schedule a redraw."""
        scan = self._scan
        if scan is None:
            return
        with scan.lock:
            scan.tree.invalidate_elem(node_id)
        scan.update_signal.set()

    def refresh(self) -> bool:
        """Redraw if the scan reported new data; return whether it did."""
        scan = self._scan
        if scan is None or not scan.update_signal.is_set():
            return False
        self._invalidate = True
        self.redraw()
        scan.update_signal.clear()
        return True

    def redraw(self) -> None:
        self.delete("all")
        scan = self._scan
        if scan is None:
            return
        size = (self.winfo_width(), self.winfo_height())
        if size != self._last_size:
            self._invalidate = True
            self._last_size = size
        with scan.lock:
            tree = scan.tree
            if not len(tree):
                self._gui_nodes = {}
                return
            root = tree.get_elem(0)
            if self._invalidate:
                bound = Rect(0.0, 0.0, float(size[0]), float(size[1]))
                self._gui_nodes = compute_gui_nodes(tree, root, bound, self._text_offset())
                self._invalidate = False
            self._draw(tree, root)

    def _tick(self) -> None:
        try:
            if not self.winfo_exists():
                return
            self.refresh()
            self.after(REFRESH_INTERVAL_MS, self._tick)
        except tk.TclError:
            return

    def _text_offset(self) -> float:
        return self._font.metrics("linespace") * 1.1

    def _fit_text(self, text: str, width: float) -> str:
        if self._font.measure(text) <= width:
            return text
        for cut in range(len(text) - 1, 0, -1):
            candidate = text[:cut] + _ELLIPSIS
            if self._font.measure(candidate) <= width:
                return candidate
        return ""

    def _draw(self, tree, root: Node) -> None:
        stack = [root]
        while stack:
            node = stack.pop()
            gui_node = self._gui_nodes.get(node.id)
            if gui_node is None:
                continue
            rect = gui_node.rect
            color = depth_file_color(node.depth) if node.is_file else depth_dir_color(node.depth)
            self.create_rectangle(
                rect.x,
                rect.y,
                rect.x + rect.width,
                rect.y + rect.height,
                fill=color_hex(color),
                outline="",
            )
            text = self._fit_text(node_label(node), rect.width)
            if text:
                self.create_text(
                    rect.x + 1, rect.y, anchor="nw", text=text, font=self._font, fill="black"
                )
            stack.extend(tree.get_elem(child) for child in reversed(node.children))

    def _locate(self, x: float, y: float) -> Node | None:
        scan = self._scan
        if scan is None:
            return None
        with scan.lock:
            if not len(scan.tree):
                return None
            tree = scan.tree
            found = locate_node(tree, tree.get_elem(0), self._gui_nodes, x, y)
            return copy.deepcopy(found) if found is not None else None

    def _on_motion(self, event) -> None:
        node = self._locate(event.x, event.y)
        if node is None:
            self._tooltip.place_forget()
            return
        self._tooltip.configure(text=node_label(node))
        self._tooltip.place(x=event.x + 12, y=event.y + 12)

    def _on_context_click(self, event) -> None:
        node = self._locate(event.x, event.y)
        if node is None:
            return
        path = node.path
        menu = self._menu
        menu.delete(0, "end")
        menu.add_command(label=abbreviate_string(node.name, 15), state="disabled")
        menu.add_command(label="Open", command=lambda: open_path(path))
        menu.add_command(label="Show directory", command=lambda: show_in_directory(path))
        if self._on_trash is not None:
            node_id = node.id
            menu.add_command(label="Trash", command=lambda: self._on_trash(path, node_id))
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()


class ProgressBarManager:
    """Keeps a progress bar in step with the current scan."""

    def __init__(self, progressbar) -> None:
        self.progressbar = progressbar
        self.scan = None
        progressbar.configure(maximum=1.0, value=0.0)
        progressbar.after(REFRESH_INTERVAL_MS, self._tick)

    def replace_scan(self, scan) -> None:
        self.scan = scan

    def refresh(self) -> float | None:
        """Show the scan's progress; return the fraction shown, if any."""
        if self.scan is None:
            return None
        fraction = self.scan.progress()
        self.progressbar.configure(value=fraction)
        return fraction

    def _tick(self) -> None:
        try:
            self.refresh()
            self.progressbar.after(REFRESH_INTERVAL_MS, self._tick)
        except tk.TclError:
            return
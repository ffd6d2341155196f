"""Main window and command-line entry point."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from tkinter import filedialog, messagebox, ttk

from .desktop import move_to_trash
from .mounts import get_mounts
from .scan import Scan
from .treemap_view import ProgressBarManager, TreeMapView
from .utils import APP_TITLE

_PROMPT = "Please click the top-left button to start a scan"


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line; ``directory`` is the first directory given, if any."""
    parser = argparse.ArgumentParser(prog="spaceman", description="Show disk usage as a treemap.")
    parser.add_argument("directories", nargs="*", metavar="DIRECTORY", help="directory to scan")
    args = parser.parse_args(argv)
    args.directory = args.directories[0] if args.directories else None
    return args


class SpaceManApp:
    """The application window: toolbar, progress bar and treemap."""

    def __init__(self, root, directory=None) -> None:
        self.root = root
        self.scan: Scan | None = None

        toolbar = ttk.Frame(root)
        toolbar.pack(fill="x")
        self.open_button = ttk.Button(toolbar, text="Open", command=self.open_dialog)
        self.open_button.pack(side="left")
        self.refresh_button = ttk.Button(
            toolbar, text="Refresh", command=self.refresh_scan, state="disabled"
        )
        self.refresh_button.pack(side="right")

        progressbar = ttk.Progressbar(root, mode="determinate")
        progressbar.pack(fill="x")
        self.progress = ProgressBarManager(progressbar)

        self.view = TreeMapView(root, on_trash=self.trash)
        self.label = ttk.Label(root, text=_PROMPT, anchor="center")
        self.label.pack(fill="both", expand=True)

        if directory is not None:
            self.start_scan(directory)

    def open_dialog(self) -> Scan | None:
        path = filedialog.askdirectory(parent=self.root, title="Choose scan target", mustexist=True)
        if not path:
            return None
        return self.start_scan(path)

    def refresh_scan(self) -> Scan | None:
        current = self.view.current_scan()
        if current is None:
            return None
        return self.start_scan(current.path)

    def start_scan(self, path) -> Scan | None:
        """Start scanning ``path`` and show it, replacing any earlier scan."""
        try:
            scan = Scan(path)
        except OSError as err:
            self._error(f"Cannot open directory {path}: {err}")
            return None
        self.label.pack_forget()
        self.view.pack(fill="both", expand=True)
        previous, self.scan = self.scan, scan
        self.view.replace_scan(scan)
        self.progress.replace_scan(scan)
        if previous is not None:
            previous.close()
        self.refresh_button.configure(state="normal")
        print(path)
        return scan

    def trash(self, path, node_id: int) -> bool:
        """Ask, then move ``path`` to the trash and drop it from the view."""
        if not messagebox.askokcancel("Move to trash", f"{path}\nMove to trash?", parent=self.root):
            return False
        try:
            move_to_trash(path)
        except OSError as err:
            self._error(f"Error moving {path} to trash: {err}")
            return False
        self.view.deletion_notice(node_id)
        return True

    def _error(self, message: str) -> None:
        messagebox.showerror(APP_TITLE, message, parent=self.root)


def main(argv=None) -> int:
    args = parse_args(argv)
    print(get_mounts(), file=sys.stderr)
    root = tk.Tk()
    root.title(APP_TITLE)
    root.geometry("640x480")
    SpaceManApp(root, args.directory)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
# spaceman

SpaceMan shows where your disk space goes. It scans a directory in a
background thread and draws its contents as a treemap: every file and
directory is a box whose area matches its size, and directories hold
the boxes of their contents.

## Installation

```
pip install .
```

The window uses Tkinter, which comes with most Python installations.
The package also needs `psutil`, which it uses to list mounted filesystems.

## Usage

Start the application with an empty window:

```
spaceman
```

Or start it with a scan of a directory already running (only the first
directory given is scanned):

```
spaceman /path/to/directory
```

On start the command prints the mounted device filesystems to standard
error.

In the window:

- **Open** (top left) picks a directory to scan.
- **Refresh** (top right) scans the current directory again.
- The progress bar fills as the scan works through the top-level entries
  of the directory, and is full once the scan has ended.
- Hover over a box to see its name and size.
- Right-click a box (also the middle button on macOS) for a menu to open
  it, show it in its directory, or move it to the trash after a
  confirmation.

The scan stays on one filesystem: directories on another device are
listed but not entered. Symbolic links are not followed.

Opening and showing items uses the platform's tools: `explorer.exe` on
Windows, `open` on macOS, and `xdg-open` and `gdbus` (the desktop's
file manager service) elsewhere. Trashing moves the item into
`~/.Trash` on macOS, into the freedesktop trash (under `$XDG_DATA_HOME`,
by default `~/.local/share/Trash`) on other Unix systems, and into the
Recycle Bin through PowerShell on Windows.

## Library use

The scanning and layout code works without the window:

```python
from spaceman.scan import Scan
from spaceman.squarify import Rect, compute_gui_nodes
from spaceman.utils import bytes_display

with Scan("/path/to/directory") as scan:
    scan.wait(None)
    with scan.lock:
        root = scan.tree.get_elem(0)
        print(root.name, bytes_display(root.size))
        layout = compute_gui_nodes(scan.tree, root, Rect(0, 0, 800, 600), 14.0)
```

- `spaceman.scan.Scan(directory)` raises `OSError` if the directory cannot
  be read. `progress()` returns a fraction from 0 to 1, `wait(timeout)`
  waits for the walk to end, and `close()` (also run on leaving the
  `with` block) stops it and empties the tree.
- `spaceman.scan.walk_entries(root)` yields `Entry` objects depth first,
  and `build_tree(tree, entries)` adds them to a `spaceman.filetree.Tree`.
- `spaceman.filetree.Tree` keeps `Node` objects by id, with node 0 as the
  root; adding or invalidating a node updates the sizes of its ancestors.
- `compute_gui_nodes` returns a mapping from node id to a `GUINode`, which
  holds the `Rect` where that node is drawn. `locate_node` finds the
  deepest node whose box holds a point.
- `spaceman.mounts.get_mounts()` lists mounted filesystems; on Unix only
  those mounted from `/dev/`, leaving out EFI partitions.
- `spaceman.utils.bytes_display` formats byte counts such as `1.50KB`.

## Development

```
pip install -e ".[test]"
pytest
```
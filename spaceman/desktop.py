"""Desktop integration: opening, revealing and trashing files."""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

_FILE_MANAGER_NAME = "org.freedesktop.FileManager1"
_FILE_MANAGER_PATH = "/org/freedesktop/FileManager1"
_FILE_MANAGER_IFACE = "org.freedesktop.FileManager1"

_WINDOWS_TRASH_SCRIPT = (
    "Add-Type -AssemblyName Microsoft.VisualBasic; "
    "$target = $env:SPACEMAN_TRASH_TARGET; "
    "if (Test-Path -LiteralPath $target -PathType Container) { "
    "[Microsoft.VisualBasic.FileIO.FileSystem]::DeleteDirectory("
    "$target, 'OnlyErrorDialogs', 'SendToRecycleBin') } else { "
    "[Microsoft.VisualBasic.FileIO.FileSystem]::DeleteFile("
    "$target, 'OnlyErrorDialogs', 'SendToRecycleBin') }"
)


def open_path(path) -> subprocess.Popen:
    """Open ``path`` with the desktop's default handler."""
    target = Path(path).absolute()
    if sys.platform == "win32":
        command = ["explorer.exe", str(target)]
    elif sys.platform == "darwin":
        command = ["open", str(target)]
    else:
        command = ["xdg-open", target.as_uri()]
    return subprocess.Popen(command)


def show_in_directory(path) -> None:
    """Show ``path`` selected in the file manager."""
    target = Path(path).absolute()
    if sys.platform == "win32":
        subprocess.Popen(["explorer.exe", "/select," + str(target)])
    elif sys.platform == "darwin":
        subprocess.Popen(["open", "-R", str(target)])
    else:
        subprocess.run(
            [
                "gdbus",
                "call",
                "--session",
                "--dest",
                _FILE_MANAGER_NAME,
                "--object-path",
                _FILE_MANAGER_PATH,
                "--method",
                f"{_FILE_MANAGER_IFACE}.ShowItems",
                f"['{target.as_uri()}']",
                "''",
            ],
            check=True,
            capture_output=True,
        )


def _unique_names(name: str):
    stem, suffix = os.path.splitext(name)
    yield name
    counter = 1
    while True:
        yield f"{stem}.{counter}{suffix}"
        counter += 1


def _trash_freedesktop(target: Path) -> Path:
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    trash = Path(data_home) / "Trash"
    files_dir = trash / "files"
    info_dir = trash / "info"
    files_dir.mkdir(parents=True, exist_ok=True)
    info_dir.mkdir(parents=True, exist_ok=True)

    for candidate in _unique_names(target.name):
        info_path = info_dir / f"{candidate}.trashinfo"
        destination = files_dir / candidate
        if destination.exists() or destination.is_symlink():
            continue
        try:
            fd = os.open(info_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o600)
        except FileExistsError:
            continue
        deletion_date = datetime.now().strftime("%Y-%m-%dT%H:%M:%S")
        with os.fdopen(fd, "w", encoding="utf-8") as info:
            info.write(
                "[Trash Info]\n"
                f"Path={quote(str(target))}\n"
                f"DeletionDate={deletion_date}\n"
            )
        try:
            shutil.move(str(target), str(destination))
        except BaseException:
            info_path.unlink(missing_ok=True)
            raise
        return destination
    raise OSError(f"no free name in trash for {target}")


def _trash_macos(target: Path) -> Path:
    trash = Path.home() / ".Trash"
    trash.mkdir(parents=True, exist_ok=True)
    for candidate in _unique_names(target.name):
        destination = trash / candidate
        if not (destination.exists() or destination.is_symlink()):
            shutil.move(str(target), str(destination))
            return destination
    raise OSError(f"no free name in trash for {target}")


def _trash_windows(target: Path) -> None:
    env = dict(os.environ, SPACEMAN_TRASH_TARGET=str(target))
    try:
        subprocess.run(
            ["powershell", "-NoProfile", "-NonInteractive", "-Command", _WINDOWS_TRASH_SCRIPT],
            check=True,
            capture_output=True,
            env=env,
        )
    except subprocess.CalledProcessError as err:
        message = err.stderr.decode(errors="replace").strip() if err.stderr else str(err)
        raise OSError(message) from err


def move_to_trash(path) -> Path | None:
    """Move ``path`` to the user's trash; return where it went when known."""
    target = Path(path).absolute()
    os.lstat(target)
    if sys.platform == "win32":
        _trash_windows(target)
        return None
    if sys.platform == "darwin":
        return _trash_macos(target)
    return _trash_freedesktop(target)
"""Listing of mounted block-device filesystems."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

import psutil

_SKIPPED_MOUNT_POINTS = frozenset({"/esp", "/efi", "/boot/efi"})


@dataclass(frozen=True)
class Mount:
    fs_mounted_from: str
    fs_mounted_on: str
    fs_type: str = ""


def filter_mounts(mounts: Iterable[Mount], unix: bool | None = None) -> list[Mount]:
    """Keep device-backed mounts, excluding EFI partitions, on Unix systems."""
    if unix is None:
        unix = os.name == "posix"
    if not unix:
        return list(mounts)
    return [
        mount
        for mount in mounts
        if mount.fs_mounted_from.startswith("/dev/")
        and mount.fs_mounted_on not in _SKIPPED_MOUNT_POINTS
    ]


def get_mounts() -> list[Mount]:
    """Return the system's mounts; on failure report it and return an empty list."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as err:
        print(f"get mounts error:{err}")
        return []
    mounts = (
        Mount(fs_mounted_from=p.device, fs_mounted_on=p.mountpoint, fs_type=p.fstype)
        for p in partitions
    )
    return filter_mounts(mounts)
from collections import namedtuple
from unittest import mock

from spaceman.mounts import Mount, filter_mounts, get_mounts

Partition = namedtuple("Partition", "device mountpoint fstype opts")

MOUNTS = [
    Mount("/dev/sda2", "/", "ext4"),
    Mount("/dev/sda1", "/boot/efi", "vfat"),
    Mount("/dev/sda3", "/efi", "vfat"),
    Mount("/dev/sda4", "/esp", "vfat"),
    Mount("proc", "/proc", "proc"),
    Mount("tmpfs", "/tmp", "tmpfs"),
    Mount("/dev/sdb1", "/home", "ext4"),
]


def test_unix_filter_keeps_devices_without_efi():
    kept = filter_mounts(MOUNTS, unix=True)
    assert [m.fs_mounted_on for m in kept] == ["/", "/home"]


def test_non_unix_keeps_everything():
    assert filter_mounts(MOUNTS, unix=False) == MOUNTS


def test_filter_accepts_generator():
    kept = filter_mounts((m for m in MOUNTS), unix=True)
    assert all(m.fs_mounted_from.startswith("/dev/") for m in kept)


def test_get_mounts_converts_partitions():
    partitions = [
        Partition("/dev/nvme0n1p2", "/", "btrfs", "rw"),
        Partition("/dev/nvme0n1p1", "/boot/efi", "vfat", "rw"),
        Partition("sysfs", "/sys", "sysfs", "rw"),
    ]
    with mock.patch("spaceman.mounts.psutil.disk_partitions", return_value=partitions), \
            mock.patch("spaceman.mounts.os.name", "posix"):
        mounts = get_mounts()
    assert mounts == [Mount("/dev/nvme0n1p2", "/", "btrfs")]


def test_get_mounts_on_error_returns_empty(capsys):
    with mock.patch(
        "spaceman.mounts.psutil.disk_partitions", side_effect=OSError("boom")
    ):
        mounts = get_mounts()
    assert mounts == []
    assert "get mounts error:boom" in capsys.readouterr().out
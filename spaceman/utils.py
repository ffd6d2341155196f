"""Application settings and small formatting helpers."""

APP_NAME = "com.github.salihgerdan.spaceman"
APP_TITLE = "SpaceMan"
# Number of walked entries added to the file tree under one lock.
CHUNK_SIZE = 16

_KIB = 1024.0
_MIB = 1024.0 * 1024.0
_GIB = 1024.0 * 1024.0 * 1024.0


def bytes_display(num_bytes: int) -> str:
    """Format a byte count with a binary unit suffix (B, KB, MB, GB)."""
    value = float(num_bytes)
    if value > _GIB:
        return f"{value / _GIB:.2f}GB"
    if value > _MIB:
        return f"{value / _MIB:.2f}MB"
    if value > _KIB:
        return f"{value / _KIB:.2f}KB"
    return f"{num_bytes}B"


def abbreviate_string(s: str, max_chars: int) -> str:
    """Shorten ``s`` to ``max_chars`` characters, ending it with "..." if cut."""
    if len(s) <= max_chars:
        return s
    if max_chars < 3:
        raise ValueError(f"cannot abbreviate to fewer than 3 characters: {max_chars}")
    return s[: max_chars - 3] + "..."
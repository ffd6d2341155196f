"""SpaceMan: scan a directory in the background and view its disk usage as a treemap."""

__version__ = "0.1.0"
__all__ = ["__version__"]
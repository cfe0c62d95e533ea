"""Error types raised by the gallery model, store and collection."""
from pathlib import Path


class GalleryError(Exception):
    """Base class for all gallery errors."""


class LoadError(GalleryError):
    """Raised when an existing collection file cannot be read or parsed."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not load exhibitions from {path}: {cause}")


class SaveError(GalleryError):
    """Raised when the collection cannot be written to disk."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not save exhibitions to {path}: {cause}")


class InvalidIndexError(GalleryError, IndexError):
    """Raised when a 1-based exhibition number is outside the collection."""

    def __init__(self, index, size: int):
        self.index = index
        self.size = size
        if size == 0:
            message = f"Invalid exhibition number {index}: the collection is empty"
        else:
            message = f"Invalid exhibition number {index}: expected 1..{size}"
        super().__init__(message)

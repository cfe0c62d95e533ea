from .log_level import LogLevel
from .config import Settings, settings
from .exceptions import GalleryError, LoadError, SaveError, InvalidIndexError
from .exhibitions import (
    Exhibition,
    ExhibitionKind,
    Painting,
    Sculpture,
    PaintingFactory,
    SculptureFactory,
    get_factory
)
from .storage import ExhibitionStore
from .collection import Gallery

__all__ = [
    'LogLevel',
    'Settings',
    'settings',
    'GalleryError',
    'LoadError',
    'SaveError',
    'InvalidIndexError',
    'Exhibition',
    'ExhibitionKind',
    'Painting',
    'Sculpture',
    'PaintingFactory',
    'SculptureFactory',
    'get_factory',
    'ExhibitionStore',
    'Gallery'
]

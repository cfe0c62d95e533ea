# gallery/storage/__init__.py
from .schemas import (
    ExhibitionFile,
    ExhibitionRecord,
    PaintingRecord,
    SculptureRecord
)
from .store import ExhibitionStore

__all__ = [
    'ExhibitionFile',
    'ExhibitionRecord',
    'PaintingRecord',
    'SculptureRecord',
    'ExhibitionStore'
]

# gallery/exhibitions/__init__.py
from .base import Exhibition, ExhibitionKind
from .painting import Painting
from .sculpture import Sculpture
from .factories import (
    ExhibitionFactory,
    PaintingFactory,
    SculptureFactory,
    get_factory
)

__all__ = [
    'Exhibition',
    'ExhibitionKind',
    'Painting',
    'Sculpture',
    'ExhibitionFactory',
    'PaintingFactory',
    'SculptureFactory',
    'get_factory'
]

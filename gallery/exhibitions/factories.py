from abc import ABC, abstractmethod
from datetime import date
import logging
import math
from typing import Optional, Type

from .base import Exhibition, ExhibitionKind
from .painting import Painting
from .sculpture import Sculpture

logger = logging.getLogger(__name__)

BASE_PRICE = 1000.0

class ExhibitionFactory(ABC):
    """Abstract base factory pricing and creating new exhibitions.

    The price is fixed once at creation:
    ``base_price + (current_year - year) * per_year_rate``. Works dated in the
    future get a reduced (possibly negative) price, which is kept as is.
    """
    exhibition_class: Type[Exhibition]

    def __init__(self, base_price: float = BASE_PRICE, per_year_rate: Optional[float] = None):
        self.base_price = base_price
        self.per_year_rate = self.default_year_rate() if per_year_rate is None else per_year_rate

    @abstractmethod
    def default_year_rate(self) -> float:
        pass

    def price_for(self, year: int, current_year: Optional[int] = None) -> float:
        '''Compute the creation price for an artwork made in ``year``'''
        if current_year is None:
            current_year = date.today().year
        try:
            price = self.base_price + (current_year - year) * self.per_year_rate
        except OverflowError:
            raise ValueError(f"year {year} is too far from {current_year} to price")
        if not math.isfinite(price):
            raise ValueError(f"year {year} is too far from {current_year} to price")
        return price

    def create(self, title: str, artist: str, year: int, current_year: Optional[int] = None) -> Exhibition:
        price = self.price_for(year, current_year)
        if price < 0:
            logger.warning(f"{self.exhibition_class.__name__} '{title}' ({year}) priced below zero: {price}")

        exhibition = self.exhibition_class(title=title, artist=artist, year=year, price=price)
        logger.exhibition(f"Created {exhibition.get_type_name()} '{title}' priced at {price}")
        return exhibition

class PaintingFactory(ExhibitionFactory):
    """Factory for creating paintings"""
    exhibition_class = Painting

    def default_year_rate(self) -> float:
        return 50.0

class SculptureFactory(ExhibitionFactory):
    """Factory for creating sculptures"""
    exhibition_class = Sculpture

    def default_year_rate(self) -> float:
        return 30.0

def get_factory(kind: ExhibitionKind, settings=None) -> ExhibitionFactory:
    '''Return the factory for ``kind``, priced from ``settings`` when given'''
    factories = {
        ExhibitionKind.PAINTING: PaintingFactory,
        ExhibitionKind.SCULPTURE: SculptureFactory,
    }

    if kind not in factories:
        raise ValueError(f"Unknown exhibition kind: {kind}")

    factory_class = factories[kind]
    if settings is None:
        return factory_class()

    rates = {
        ExhibitionKind.PAINTING: settings.painting_year_rate,
        ExhibitionKind.SCULPTURE: settings.sculpture_year_rate,
    }
    return factory_class(base_price=settings.base_price, per_year_rate=rates[kind])

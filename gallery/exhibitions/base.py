from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

class ExhibitionKind(str, Enum):
    """Discriminator identifying the concrete exhibition variant"""
    PAINTING = "painting"
    SCULPTURE = "sculpture"

@dataclass
class Exhibition(ABC):
    """Abstract artwork record shared by every exhibition variant.

    Fields are taken as given; the model performs no validation. Selling an
    exhibition only describes the sale, removing it from a collection is the
    caller's job.
    """
    title: str
    artist: str
    year: int
    price: float

    kind: ClassVar[ExhibitionKind]

    @abstractmethod
    def get_type_name(self) -> str:
        '''Return the label identifying the variant'''
        pass

    @abstractmethod
    def display_info(self) -> str:
        '''Return a one-line description including the formatted price'''
        pass

    @abstractmethod
    def visit(self) -> str:
        '''Return the narrative of visiting this exhibition'''
        pass

    @abstractmethod
    def sell(self, custom_price: Optional[float] = None) -> str:
        '''Return the narrative of selling this exhibition'''
        pass

    def sale_price(self, custom_price: Optional[float] = None) -> float:
        """Final sale price: ``custom_price`` if positive, else the stored price"""
        if custom_price is not None and custom_price > 0:
            return custom_price
        return self.price

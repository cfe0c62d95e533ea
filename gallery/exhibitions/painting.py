from dataclasses import dataclass
from typing import Optional

from .base import Exhibition, ExhibitionKind
from ..utils import format_price

@dataclass
class Painting(Exhibition):
    """Painting exhibition"""
    kind = ExhibitionKind.PAINTING

    def get_type_name(self) -> str:
        return "Painting"

    def display_info(self) -> str:
        return (f"[Painting] Title: {self.title}, Artist: {self.artist}, "
                f"Year: {self.year}, Price: {format_price(self.price)}")

    def visit(self) -> str:
        return f"You had a great time at the painting exhibition: {self.title}"

    def sell(self, custom_price: Optional[float] = None) -> str:
        final_price = self.sale_price(custom_price)
        return f'Painting "{self.title}" sold for {format_price(final_price)}.'

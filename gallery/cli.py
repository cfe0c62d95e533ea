'''
Interactive text menu for managing the gallery collection
'''
import logging
from typing import Callable, Optional

from .collection import Gallery
from .config import Settings
from .exceptions import InvalidIndexError, SaveError
from .exhibitions import ExhibitionKind, get_factory
from .storage import ExhibitionStore
from .utils import format_price

logger = logging.getLogger(__name__)

MENU = """
Gallery Management System
1. Add a new masterpiece
2. List exhibitions
3. Sell a painting or sculpture
4. Delete an exhibition
5. Exit"""

TYPE_CHOICES = {
    '1': ExhibitionKind.PAINTING,
    '2': ExhibitionKind.SCULPTURE,
}

class GalleryMenu:
    """Menu loop driving a Gallery from console input.

    Args:
        gallery: Collection to operate on
        settings: Pricing settings for new exhibitions
        input_func: Prompt-and-read function, ``input`` by default
        output_func: Line printer, ``print`` by default
    """

    def __init__(self, gallery: Gallery, settings: Settings,
                 input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.gallery = gallery
        self.settings = settings
        self._input = input_func
        self._output = output_func

    def run(self) -> None:
        actions = {
            '1': self.add_exhibition,
            '2': self.list_exhibitions,
            '3': self.sell_exhibition,
            '4': self.delete_exhibition,
        }

        while True:
            self._output(MENU)
            choice = self._prompt("Choose an option: ")
            if choice is None or choice == '5':
                return

            action = actions.get(choice)
            if action is None:
                self._output("Invalid option. Please try again.")
                continue

            try:
                action()
            except InvalidIndexError as e:
                logger.debug(str(e))
                self._output("Invalid exhibition number.")
            except SaveError as e:
                self._output(f"Warning: changes were not saved ({e.cause}).")
            except ValueError as e:
                self._output(f"Error: {e}")

    def add_exhibition(self) -> None:
        title = self._prompt("Enter the title of the masterpiece: ") or ""
        artist = self._prompt("Enter the artist's name: ") or ""
        year = self._read_int("Enter the year of creation: ")
        kind = TYPE_CHOICES.get(self._prompt("Choose the type (1: Painting, 2: Sculpture): "))
        if kind is None:
            raise ValueError("unknown exhibition type")

        exhibition = get_factory(kind, self.settings).create(title, artist, year)
        self._output(exhibition.display_info())

        if self._prompt("Do you want to save the masterpiece? (1: Yes, 0: No): ") == '1':
            self.gallery.add(exhibition)
            self._output("Masterpiece saved successfully.")
        else:
            self._output("Masterpiece was not saved.")

    def list_exhibitions(self) -> None:
        if not len(self.gallery):
            self._output("There are no exhibitions yet.")
            return

        for number, exhibition in enumerate(self.gallery, start=1):
            self._output(f"{number}. [{exhibition.get_type_name()}] {exhibition.title} "
                         f"({exhibition.artist}, {exhibition.year}) - {format_price(exhibition.price)}")

        choice = self._prompt("Choose an exhibition to visit or press Enter to go back: ")
        if not choice:
            return
        self._output(self.gallery.get(self._parse_index(choice)).visit())

    def sell_exhibition(self) -> None:
        index = self._parse_index(self._prompt("Enter the number of the exhibition to sell: "))
        exhibition = self.gallery.get(index)

        option = self._prompt(f"Sell at the current price ({format_price(exhibition.price)}) "
                              f"or enter your own (1: Current, 2: Own)? ")
        custom_price = None
        if option == '2':
            custom_price = self._read_float("Enter your price: ")

        try:
            narrative = self.gallery.sell(index, custom_price)
        except SaveError:
            # The sale already happened in memory
            self._output(exhibition.sell(custom_price))
            raise
        self._output(narrative)

    def delete_exhibition(self) -> None:
        index = self._parse_index(self._prompt("Enter the number of the exhibition to delete: "))
        self.gallery.delete(index)
        self._output("Exhibition deleted successfully.")

    def _prompt(self, message: str) -> Optional[str]:
        try:
            return self._input(message).strip()
        except EOFError:
            return None

    def _read_int(self, message: str) -> int:
        raw = self._prompt(message)
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"'{raw}' is not a whole number")

    def _read_float(self, message: str) -> float:
        raw = self._prompt(message)
        try:
            return float(raw)
        except (TypeError, ValueError):
            raise ValueError(f"'{raw}' is not a valid price")

    def _parse_index(self, raw: Optional[str]) -> int:
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise InvalidIndexError(raw, len(self.gallery))


def run_menu(settings: Settings, input_func: Callable[[str], str] = input,
             output_func: Callable[[str], None] = print) -> Gallery:
    """Load the configured collection and run the menu until the user exits."""
    gallery, warning = Gallery.load(ExhibitionStore(settings.data_file))
    if warning:
        output_func(f"Warning: {warning}. Starting with an empty collection.")

    GalleryMenu(gallery, settings, input_func, output_func).run()
    return gallery

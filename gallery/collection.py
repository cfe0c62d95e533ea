import logging
from typing import Iterator, List, Optional, Tuple

from .exceptions import InvalidIndexError, LoadError
from .exhibitions import Exhibition
from .storage import ExhibitionStore

logger = logging.getLogger(__name__)

class Gallery:
    """Ordered exhibition collection backed by an ExhibitionStore.

    Exhibitions are addressed by 1-based position. Every mutation rewrites the
    whole file; if that write fails the SaveError propagates but the in-memory
    change stays, and the next mutation writes it again.
    """

    def __init__(self, store: ExhibitionStore, exhibitions: Optional[List[Exhibition]] = None):
        self.store = store
        self._exhibitions: List[Exhibition] = list(exhibitions) if exhibitions else []

    @classmethod
    def load(cls, store: ExhibitionStore) -> Tuple["Gallery", Optional[str]]:
        """Load a gallery from ``store``.

        Returns the gallery and a warning message. An unreadable file gives an
        empty gallery plus the load error text rather than raising.
        """
        try:
            exhibitions = store.load_all()
        except LoadError as e:
            logger.warning(f"Starting with an empty collection: {e}")
            return cls(store), str(e)
        return cls(store, exhibitions), None

    def __len__(self) -> int:
        return len(self._exhibitions)

    def __iter__(self) -> Iterator[Exhibition]:
        return iter(self._exhibitions)

    @property
    def exhibitions(self) -> Tuple[Exhibition, ...]:
        return tuple(self._exhibitions)

    def get(self, index: int) -> Exhibition:
        '''Return the exhibition at 1-based ``index``'''
        return self._exhibitions[self._position(index)]

    def add(self, exhibition: Exhibition) -> None:
        self._exhibitions.append(exhibition)
        logger.exhibition(f"Added {exhibition.get_type_name()} '{exhibition.title}'")
        self.save()

    def sell(self, index: int, custom_price: Optional[float] = None) -> str:
        '''Sell the exhibition at ``index``, remove it and save'''
        position = self._position(index)
        exhibition = self._exhibitions[position]
        narrative = exhibition.sell(custom_price)

        del self._exhibitions[position]
        logger.exhibition(f"Sold {exhibition.get_type_name()} '{exhibition.title}' "
                          f"for {exhibition.sale_price(custom_price)}")
        self.save()
        return narrative

    def delete(self, index: int) -> Exhibition:
        '''Remove the exhibition at ``index``, save, and return it'''
        exhibition = self._exhibitions.pop(self._position(index))
        logger.exhibition(f"Deleted {exhibition.get_type_name()} '{exhibition.title}'")
        self.save()
        return exhibition

    def save(self) -> None:
        self.store.save_all(self._exhibitions)

    def _position(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool) or not 1 <= index <= len(self._exhibitions):
            raise InvalidIndexError(index, len(self._exhibitions))
        return index - 1

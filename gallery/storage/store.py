import logging
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import ValidationError

from ..exceptions import LoadError, SaveError
from ..exhibitions import Exhibition
from .schemas import ExhibitionFile, RECORD_TYPES

logger = logging.getLogger(__name__)

class ExhibitionStore:
    """Persists an ordered, mixed collection of exhibitions to one JSON file.

    Each record carries a ``kind`` tag taken from the exhibition's class when
    saving, so loading rebuilds every element as the variant it was saved as.
    Saves write a sibling ``.tmp`` file and replace the destination with it; on
    platforms without an atomic replace an interrupted save can still leave a
    truncated file behind.
    """

    def __init__(self, path: Union[str, Path]):
        # Ensure we have a Path object
        self.path = Path(path) if not isinstance(path, Path) else path

    def load_all(self) -> List[Exhibition]:
        '''Load every exhibition in file order, or [] if the file does not exist'''
        if not self.path.exists():
            logger.collection(f"No collection file at {self.path}. Starting empty")
            return []

        try:
            with self.path.open('r', encoding='utf-8') as f:
                raw = f.read()
            document = ExhibitionFile.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.error(f"Error loading collection file {self.path}: {e}")
            raise LoadError(self.path, e) from e

        exhibitions = [record.to_exhibition() for record in document.exhibitions]
        logger.collection(f"Loaded {len(exhibitions)} exhibitions from {self.path}")
        return exhibitions

    def save_all(self, exhibitions: Sequence[Exhibition]) -> None:
        '''Overwrite the collection file with ``exhibitions``'''
        records = []
        for exhibition in exhibitions:
            record_type = RECORD_TYPES.get(type(exhibition))
            if record_type is None:
                error = TypeError(f"Unsupported exhibition type: {type(exhibition).__name__}")
                logger.error(str(error))
                raise SaveError(self.path, error)
            try:
                records.append(record_type.from_exhibition(exhibition))
            except ValidationError as e:
                logger.error(f"Cannot save {type(exhibition).__name__} '{exhibition.title}': {e}")
                raise SaveError(self.path, e) from e

        payload = ExhibitionFile(exhibitions=records).model_dump_json(indent=4)

        temp_file = self.path.with_suffix(self.path.suffix + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_file.open('w', encoding='utf-8') as f:
                f.write(payload)
            temp_file.replace(self.path)
        except OSError as e:
            logger.error(f"Error saving collection file {self.path}: {e}")
            temp_file.unlink(missing_ok=True)
            raise SaveError(self.path, e) from e

        logger.collection(f"Saved {len(records)} exhibitions to {self.path}")

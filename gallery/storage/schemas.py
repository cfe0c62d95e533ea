from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, ClassVar, List, Literal, Type, Union

from ..exhibitions import Exhibition, ExhibitionKind, Painting, Sculpture

class ExhibitionRecord(BaseModel):
    """Serialized form of one exhibition, tagged with its variant"""
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    exhibition_class: ClassVar[Type[Exhibition]]

    title: str
    artist: str
    year: int
    price: float

    @classmethod
    def from_exhibition(cls, exhibition: Exhibition) -> "ExhibitionRecord":
        return cls(
            title=exhibition.title,
            artist=exhibition.artist,
            year=exhibition.year,
            price=exhibition.price
        )

    def to_exhibition(self) -> Exhibition:
        return self.exhibition_class(
            title=self.title,
            artist=self.artist,
            year=self.year,
            price=self.price
        )

class PaintingRecord(ExhibitionRecord):
    exhibition_class: ClassVar[Type[Exhibition]] = Painting
    kind: Literal["painting"] = ExhibitionKind.PAINTING.value

class SculptureRecord(ExhibitionRecord):
    exhibition_class: ClassVar[Type[Exhibition]] = Sculpture
    kind: Literal["sculpture"] = ExhibitionKind.SCULPTURE.value

AnyExhibitionRecord = Annotated[
    Union[PaintingRecord, SculptureRecord],
    Field(discriminator="kind")
]

# Runtime variant -> record type, so the tag always follows the object's class
RECORD_TYPES = {
    Painting: PaintingRecord,
    Sculpture: SculptureRecord,
}

class ExhibitionFile(BaseModel):
    """Root of the collection file: exhibitions in collection order"""
    model_config = ConfigDict(extra="forbid")

    exhibitions: List[AnyExhibitionRecord]

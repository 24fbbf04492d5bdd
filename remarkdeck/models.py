from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from remarkdeck.services.chunking import SLIDE_SEPARATOR


class Slide(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    number: int
    raw_content: str
    content: str
    notes: Optional[str] = None
    steps: Tuple[str, ...] = ()
    own_directives: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    layout_directives: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("own_directives", "layout_directives")
    @classmethod
    def freeze_directives(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("own_directives", "layout_directives")
    def dump_directives(self, v: Mapping[str, str]) -> dict:
        return dict(v)

    @property
    def classes(self) -> List[str]:
        """Classi CSS risolte, in ordine e senza duplicati."""
        value = self.layout_directives.get("class", "")
        classes = []
        for item in value.split(","):
            item = item.strip()
            if item and item not in classes:
                classes.append(item)
        return classes

    @property
    def name(self) -> Optional[str]:
        return self.own_directives.get("name")

    @property
    def is_layout(self) -> bool:
        return self.own_directives.get("layout", "").lower() == "true"


class Deck(BaseModel):
    model_config = ConfigDict(frozen=True)

    slides: Tuple[Slide, ...]
    title: Optional[str] = None

    @model_validator(mode="after")
    def check_slides(self) -> "Deck":
        if not self.slides:
            raise ValueError("a deck needs at least one slide")
        for position, slide in enumerate(self.slides):
            if slide.index != position:
                raise ValueError(f"slide at position {position} has index {slide.index}")
        return self

    @property
    def length(self) -> int:
        return len(self.slides)

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]

    def find(self, name: str) -> Optional[Slide]:
        for slide in self.slides:
            if slide.name == name:
                return slide
        return None

    def to_source(self) -> str:
        """Ricostruisce il sorgente unendo le slide con il separatore."""
        return f"\n{SLIDE_SEPARATOR}\n".join(slide.raw_content for slide in self.slides)

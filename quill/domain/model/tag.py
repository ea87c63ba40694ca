"""Tag value embedded in posts."""

from enum import Enum

from pydantic import Field, field_validator

from quill.domain.model.common import DomainModel


class TagType(str, Enum):
    """Category a tag belongs to."""

    DESIGN = "design"
    TATTOO = "tattoo"
    PAINTING = "painting"
    PHOTOGRAPHY = "photography"
    AUDIO = "audio"
    AV = "av"
    ESSAYS = "essays"
    RESOURCES = "resources"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES[self.value]

    @classmethod
    def display_name_for(cls, value: str) -> str:
        """Display name for a raw type value; unknown values pass through."""
        return CATEGORY_DISPLAY_NAMES.get(value, value)


CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "essays": "Essays",
    "design": "Design",
    "tattoo": "Tattoo",
    "painting": "Painting",
    "photography": "Photography",
    "audio": "Audio",
    "av": "Audio/Visual",
    "resources": "Resources",
}


class Tag(DomainModel):
    """Tag attached to a post.

    Tags have no identity of their own; they are owned by their post and
    stored in order.
    """

    name: str = Field(min_length=1, max_length=50)
    type: TagType

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

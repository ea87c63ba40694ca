"""Category catalog derived from post tags."""

import logfire

from quill.domain.model.tag import TagType
from quill.domain.repository import PostRepository
from quill.domain.value.common import ValueObject

from .base import Service


class Category(ValueObject):
    """One entry of the category catalog."""

    id: str
    name: str
    type: str
    count: int


class CategoryService(Service):
    """Aggregates tag types across published posts."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def list_categories(self) -> list[Category]:
        """List tag types with their occurrence counts.

        Sorted by count descending, ties by type name ascending. Unknown
        types keep their raw value as display name.
        """
        with logfire.span("category_service.list_categories"):
            counts = await self.post_repository.count_tag_types(published_only=True)
            counts = sorted(counts, key=lambda c: (-c.count, c.type))

            categories = [
                Category(
                    id=c.type,
                    name=TagType.display_name_for(c.type),
                    type=c.type,
                    count=c.count,
                )
                for c in counts
            ]
            logfire.info("Categories listed", count=len(categories))
            return categories

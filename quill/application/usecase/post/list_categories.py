"""List categories use case."""

from quill.application.usecase.base import ApiModel
from quill.domain.service import CategoryService


class CategoryResponse(ApiModel):
    """Category catalog entry."""

    id: str
    name: str
    type: str
    count: int


class ListCategoriesUseCase:
    """Use case for the category catalog of published posts."""

    def __init__(self, category_service: CategoryService) -> None:
        """Initialize list categories use case.

        Args:
            category_service: Category domain service
        """
        self.category_service = category_service

    async def execute(self) -> list[CategoryResponse]:
        categories = await self.category_service.list_categories()
        return [CategoryResponse(**c.model_dump()) for c in categories]

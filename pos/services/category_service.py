from typing import List
import logging

from pos.models.category import Category
from pos.services.errors import NotFoundError
from pos.services.record_store import RecordStore

logger = logging.getLogger(__name__)


class CategoryService:
    """Service class for product categories."""

    def __init__(self, categories: RecordStore[Category]):
        self.categories = categories

    def get_all(self) -> List[Category]:
        return self.categories.find(order_by=Category.name)

    def create(self, name: str) -> Category:
        category = self.categories.insert(Category(name=name))
        logger.info(f"Category created: {category.name}")
        return category

    def update(self, category_id: int, name: str) -> Category:
        """Rename a category. Raises NotFoundError if it doesn't exist."""
        if not self.categories.update({"id": category_id}, {"name": name}):
            raise NotFoundError("Category not found")

        logger.info(f"Category updated: {name}")
        return self.categories.find_one(id=category_id)

    def delete(self, category_id: int) -> None:
        if not self.categories.remove({"id": category_id}):
            raise NotFoundError("Category not found")

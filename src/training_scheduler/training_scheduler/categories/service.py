from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_color, optional_text, require_non_empty
from ..core.constants import MAX_NAME_LENGTH
from ..core.exceptions import NotFoundError
from .model import TrainingCategory
from .repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, categories: CategoryRepository):
        self._categories = categories

    def list_categories(self) -> Sequence[TrainingCategory]:
        return self._categories.list_all()

    def get(self, category_id: int) -> TrainingCategory:
        category = self._categories.get_by_id(int(category_id))
        if not category:
            raise NotFoundError("Training category not found")
        return category

    def create(self, *, name: str, description: Optional[str] = None, color: Optional[str] = None) -> TrainingCategory:
        category_id = self._categories.create(
            name=require_non_empty(name, "Name", max_len=MAX_NAME_LENGTH),
            description=optional_text(description),
            color=optional_color(color),
        )
        logger.info("Created training category category_id=%s", category_id)
        return self.get(category_id)

    def update(
        self,
        *,
        category_id: int,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> TrainingCategory:
        self.get(category_id)
        self._categories.update(
            category_id=int(category_id),
            name=require_non_empty(name, "Name", max_len=MAX_NAME_LENGTH),
            description=optional_text(description),
            color=optional_color(color),
        )
        return self.get(category_id)

    def delete(self, category_id: int) -> None:
        if not self._categories.delete(int(category_id)):
            raise NotFoundError("Training category not found")
        logger.info("Deleted training category category_id=%s", category_id)

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TrainingCategory


class CategoryRepository(Protocol):
    def get_by_id(self, category_id: int) -> Optional[TrainingCategory]:
        raise NotImplementedError

    def list_all(self) -> Sequence[TrainingCategory]:
        raise NotImplementedError

    def create(self, *, name: str, description: Optional[str], color: Optional[str]) -> int:
        raise NotImplementedError

    def update(self, *, category_id: int, name: str, description: Optional[str], color: Optional[str]) -> None:
        raise NotImplementedError

    def delete(self, category_id: int) -> bool:
        """Delete a category; sessions referencing it keep existing with no category."""

        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TrainingCategory:
    category_id: int
    name: str
    description: Optional[str] = None
    color: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.category_id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
        }

# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class Course:
    """
    Pure domain model for Course entity - no external dependencies.

    creator_id is the admin who created the course. It is set once and no
    update ever changes it.
    """
    id: Optional[str]
    creator_id: str
    title: str
    description: str = ""
    price: float = 0.0
    image_url: str = ""

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.creator_id:
            raise ValueError("Creator admin ID is required")
        if not self.title or len(self.title.strip()) < 1:
            raise ValueError("Course title is required")
        if self.price < 0:
            raise ValueError("Course price cannot be negative")

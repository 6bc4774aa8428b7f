from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Purchase:
    """A user bought a course. Never mutated after creation."""
    id: Optional[str]
    user_id: str
    course_id: str

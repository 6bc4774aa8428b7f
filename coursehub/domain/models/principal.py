from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PrincipalClass(str, Enum):
    """The two disjoint classes of authenticated identity"""
    USER = "user"
    ADMIN = "admin"


@dataclass
class Principal:
    """Pure domain model for a User or an Admin, told apart by principal_class"""
    id: Optional[str]
    principal_class: PrincipalClass
    email: str
    hashed_password: str
    first_name: str
    last_name: str

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if not self.first_name or not self.last_name:
            raise ValueError("First and last name are required")

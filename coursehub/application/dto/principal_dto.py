from .base_dto import CamelModel


class PrincipalProfile(CamelModel):
    """DTO for a user or admin profile (no password)"""
    id: str
    email: str
    first_name: str
    last_name: str

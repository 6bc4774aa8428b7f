from .register_principal import RegisterPrincipalUseCase
from .authenticate_principal import AuthenticatePrincipalUseCase

__all__ = [
    "RegisterPrincipalUseCase",
    "AuthenticatePrincipalUseCase",
]

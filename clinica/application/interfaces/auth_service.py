"""Interface AuthService - Puerto para identificar al usuario actual."""

from abc import ABC, abstractmethod


class AuthService(ABC):
    """Puerto para obtener el usuario autenticado (dueño de los registros)."""

    @abstractmethod
    async def get_current_user_id(self) -> str:
        """
        Retorna el ID del usuario actual.

        Raises:
            DomainError: Si no hay usuario autenticado.
        """
        raise NotImplementedError

    @abstractmethod
    async def is_authenticated(self) -> bool:
        raise NotImplementedError

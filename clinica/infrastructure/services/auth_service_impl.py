"""Servicio de autenticación con usuario fijo (modo in-memory)."""

from clinica.application.interfaces.auth_service import AuthService
from clinica.domain.errors import DomainError


class StaticAuthService(AuthService):
    """Retorna siempre el mismo usuario configurado."""

    def __init__(self, user_id: str | None = None) -> None:
        self._user_id = user_id

    async def get_current_user_id(self) -> str:
        if not self._user_id:
            raise DomainError("Usuário não autenticado", code="UNAUTHENTICATED")
        return self._user_id

    async def is_authenticated(self) -> bool:
        return bool(self._user_id)

    def set_user(self, user_id: str | None) -> None:
        self._user_id = user_id

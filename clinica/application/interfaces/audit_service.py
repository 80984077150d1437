"""Interface AuditService - Puerto para registro de auditoría."""

from abc import ABC, abstractmethod
from typing import Any


class AuditService(ABC):
    """Puerto para registrar cambios sobre los recursos."""

    @abstractmethod
    async def log(
        self,
        action: str,
        resource_type: str,
        resource_id: str | None,
        old_data: Any = None,
        new_data: Any = None,
    ) -> None:
        """
        Registra una acción de auditoría.

        Args:
            action: CREATE, UPDATE o DELETE.
            resource_type: Tabla/tipo del recurso (ej: "appointments").
            resource_id: ID del recurso afectado.
            old_data: Estado anterior serializado.
            new_data: Estado nuevo serializado.
        """
        raise NotImplementedError

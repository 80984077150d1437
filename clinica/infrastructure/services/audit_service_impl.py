"""Servicio de auditoría que escribe en el log de la aplicación."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.auth_service import AuthService

REDACTED = "[REDACTED]"

SENSITIVE_FIELDS = frozenset({
    "password",
    "token",
    "email",
    "cpf",
    "phone",
    "address",
    "clinical_evolution",
    "notes",
    "value",
    "payment_date",
    "patient_email",
    "patient_phone",
})


def redact(data: Any) -> dict[str, Any] | None:
    """Oculta los campos sensibles con valor antes de registrarlos."""
    if not isinstance(data, dict):
        return None
    return {
        key: REDACTED if key in SENSITIVE_FIELDS and value else value
        for key, value in data.items()
    }


@dataclass
class AuditEntry:
    action: str
    resource_type: str
    resource_id: str | None
    user_id: str | None
    old_data: dict[str, Any] | None
    new_data: dict[str, Any] | None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LoggingAuditService(AuditService):
    """
    Registra acciones de auditoría en el logger `clinica.audit`.

    Las entradas quedan además en `entries` para inspección en tests.
    Sin usuario autenticado la acción no se registra.
    """

    def __init__(self, auth_service: AuthService | None = None) -> None:
        self._auth_service = auth_service
        self._logger = logging.getLogger("clinica.audit")
        self.entries: list[AuditEntry] = []

    async def log(
        self,
        action: str,
        resource_type: str,
        resource_id: str | None,
        old_data: Any = None,
        new_data: Any = None,
    ) -> None:
        user_id = None
        if self._auth_service is not None:
            if not await self._auth_service.is_authenticated():
                return
            user_id = await self._auth_service.get_current_user_id()

        entry = AuditEntry(
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            user_id=user_id,
            old_data=redact(old_data),
            new_data=redact(new_data),
        )
        self.entries.append(entry)
        self._logger.info(
            "Audit %s %s",
            action,
            resource_type,
            extra={
                "action": action,
                "resource_type": resource_type,
                "resource_id": resource_id,
                "user_id": user_id,
            },
        )

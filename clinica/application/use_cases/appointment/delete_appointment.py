import logging
from typing import Any

from clinica.application.dtos.appointment_dto import DeleteAppointmentOutput
from clinica.application.dtos.common import read_id
from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.domain.constants import RESOURCE_APPOINTMENT
from clinica.domain.errors import NotFoundError

AUDIT_RESOURCE = "appointment"


class DeleteAppointmentUseCase:
    def __init__(self, appointment_repo: AppointmentRepo, audit_service: AuditService) -> None:
        self._appointment_repo = appointment_repo
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Any) -> DeleteAppointmentOutput:
        appointment_id = read_id(data)
        existing = await self._appointment_repo.find_by_id(appointment_id)
        if existing is None:
            raise NotFoundError(RESOURCE_APPOINTMENT, appointment_id)

        await self._appointment_repo.delete(appointment_id)
        self._logger.info("Appointment deleted", extra={"appointment_id": appointment_id})

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log(
                "delete", AUDIT_RESOURCE, appointment_id, existing.to_json(), None
            ),
            action="delete",
            resource_type=AUDIT_RESOURCE,
            resource_id=appointment_id,
        )
        return DeleteAppointmentOutput(success=True)

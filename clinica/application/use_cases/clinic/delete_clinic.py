import logging
from typing import Any

from clinica.application.dtos.clinic_dto import DeleteClinicOutput
from clinica.application.dtos.common import read_id
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.domain.constants import RESOURCE_CLINIC
from clinica.domain.errors import NotFoundError

AUDIT_RESOURCE = "clinic"


class DeleteClinicUseCase:
    def __init__(self, clinic_repo: ClinicRepo, audit_service: AuditService) -> None:
        self._clinic_repo = clinic_repo
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Any) -> DeleteClinicOutput:
        clinic_id = read_id(data)
        existing = await self._clinic_repo.find_by_id(clinic_id)
        if existing is None:
            raise NotFoundError(RESOURCE_CLINIC, clinic_id)

        await self._clinic_repo.delete(clinic_id)
        self._logger.info("Clinic deleted", extra={"clinic_id": clinic_id})

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("delete", AUDIT_RESOURCE, clinic_id, existing.to_json(), None),
            action="delete",
            resource_type=AUDIT_RESOURCE,
            resource_id=clinic_id,
        )
        return DeleteClinicOutput(success=True)

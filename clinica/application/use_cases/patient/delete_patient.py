import logging
from typing import Any

from clinica.application.dtos.common import read_id
from clinica.application.dtos.patient_dto import DeletePatientOutput
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.domain.constants import RESOURCE_PATIENT
from clinica.domain.errors import NotFoundError

AUDIT_RESOURCE = "patient"


class DeletePatientUseCase:
    def __init__(self, patient_repo: PatientRepo, audit_service: AuditService) -> None:
        self._patient_repo = patient_repo
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Any) -> DeletePatientOutput:
        patient_id = read_id(data)
        existing = await self._patient_repo.find_by_id(patient_id)
        if existing is None:
            raise NotFoundError(RESOURCE_PATIENT, patient_id)

        await self._patient_repo.delete(patient_id)
        self._logger.info("Patient deleted", extra={"patient_id": patient_id})

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("delete", AUDIT_RESOURCE, patient_id, existing.to_json(), None),
            action="delete",
            resource_type=AUDIT_RESOURCE,
            resource_id=patient_id,
        )
        return DeletePatientOutput(success=True)

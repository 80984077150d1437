import logging
from typing import Any, Mapping

from clinica.application.dtos.patient_dto import UpdatePatientOutput
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.patient import UpdatePatientInputValidator
from clinica.domain.constants import RESOURCE_PATIENT
from clinica.domain.errors import NotFoundError

AUDIT_RESOURCE = "patient"


class UpdatePatientUseCase:
    """
    Actualiza un paciente.

    Solo se tocan los campos presentes en la entrada: `email=None` elimina el
    email, mientras que omitir `email` lo deja igual.
    """

    def __init__(
        self,
        patient_repo: PatientRepo,
        validator: UpdatePatientInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
    ) -> None:
        self._patient_repo = patient_repo
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> UpdatePatientOutput:
        validated = self._validator.validate(data)

        existing = await self._patient_repo.find_by_id(validated.id)
        if existing is None:
            raise NotFoundError(RESOURCE_PATIENT, validated.id)
        old_data = existing.to_json()

        provided = validated.provided
        if "name" in provided and validated.name is not None:
            existing.update_name(self._sanitizer.sanitize_text(validated.name))
        if "email" in provided:
            existing.update_email(validated.email)
        if "phone" in provided:
            existing.update_phone(validated.phone)

        updated = await self._patient_repo.update(existing)
        self._logger.info(
            "Patient updated", extra={"patient_id": updated.id, "fields": sorted(provided)}
        )

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("update", AUDIT_RESOURCE, updated.id, old_data, updated.to_json()),
            action="update",
            resource_type=AUDIT_RESOURCE,
            resource_id=updated.id,
        )
        return UpdatePatientOutput(patient=updated)

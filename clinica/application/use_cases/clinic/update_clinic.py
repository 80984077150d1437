import logging
from typing import Any, Mapping

from clinica.application.dtos.clinic_dto import UpdateClinicOutput
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.clinic import UpdateClinicInputValidator
from clinica.domain.constants import CLINIC_STATUS_ACTIVE, CLINIC_STATUS_INACTIVE, RESOURCE_CLINIC
from clinica.domain.errors import NotFoundError

AUDIT_RESOURCE = "clinic"


class UpdateClinicUseCase:
    """Actualiza nombre, dirección, email, teléfono y estado de una clínica."""

    def __init__(
        self,
        clinic_repo: ClinicRepo,
        validator: UpdateClinicInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
    ) -> None:
        self._clinic_repo = clinic_repo
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> UpdateClinicOutput:
        validated = self._validator.validate(data)

        existing = await self._clinic_repo.find_by_id(validated.id)
        if existing is None:
            raise NotFoundError(RESOURCE_CLINIC, validated.id)
        old_data = existing.to_json()

        provided = validated.provided
        if "name" in provided and validated.name is not None:
            existing.update_name(self._sanitizer.sanitize_text(validated.name))
        if "address" in provided:
            address = validated.address
            existing.update_address(self._sanitizer.sanitize_text(address) if address else None)
        if "email" in provided:
            existing.update_email(validated.email)
        if "phone" in provided:
            existing.update_phone(validated.phone)
        if validated.status == CLINIC_STATUS_ACTIVE:
            existing.activate()
        elif validated.status == CLINIC_STATUS_INACTIVE:
            existing.deactivate()

        updated = await self._clinic_repo.update(existing)
        self._logger.info(
            "Clinic updated", extra={"clinic_id": updated.id, "fields": sorted(provided)}
        )

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("update", AUDIT_RESOURCE, updated.id, old_data, updated.to_json()),
            action="update",
            resource_type=AUDIT_RESOURCE,
            resource_id=updated.id,
        )
        return UpdateClinicOutput(clinic=updated)

import logging
from typing import Any, Mapping

from clinica.application.dtos.clinic_dto import CreateClinicOutput
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.clinic import CreateClinicInputValidator
from clinica.domain.entities.clinic import Clinic

AUDIT_RESOURCE = "clinic"


class CreateClinicUseCase:
    def __init__(
        self,
        clinic_repo: ClinicRepo,
        validator: CreateClinicInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
    ) -> None:
        self._clinic_repo = clinic_repo
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> CreateClinicOutput:
        validated = self._validator.validate(data)

        clinic = Clinic.create(
            name=self._sanitizer.sanitize_text(validated.name),
            address=self._sanitizer.sanitize_text(validated.address) if validated.address else None,
            email=validated.email,
            phone=validated.phone,
            status=validated.status,
        )
        created = await self._clinic_repo.create(clinic)
        self._logger.info("Clinic created", extra={"clinic_id": created.id})

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("create", AUDIT_RESOURCE, created.id, None, created.to_json()),
            action="create",
            resource_type=AUDIT_RESOURCE,
            resource_id=created.id,
        )
        return CreateClinicOutput(clinic=created)

import logging
from typing import Any, Mapping

from clinica.application.dtos.patient_dto import CreatePatientOutput
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.auth_service import AuthService
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.patient import CreatePatientInputValidator
from clinica.domain.entities.patient import Patient

AUDIT_RESOURCE = "patient"


class CreatePatientUseCase:
    """Crea un paciente cuyo dueño es el usuario autenticado."""

    def __init__(
        self,
        patient_repo: PatientRepo,
        auth_service: AuthService,
        validator: CreatePatientInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
    ) -> None:
        self._patient_repo = patient_repo
        self._auth_service = auth_service
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> CreatePatientOutput:
        validated = self._validator.validate(data)
        user_id = await self._auth_service.get_current_user_id()

        patient = Patient.create(
            name=self._sanitizer.sanitize_text(validated.name),
            user_id=user_id,
            email=validated.email,
            phone=validated.phone,
        )
        created = await self._patient_repo.create(patient)
        self._logger.info("Patient created", extra={"patient_id": created.id})

        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("create", AUDIT_RESOURCE, created.id, None, created.to_json()),
            action="create",
            resource_type=AUDIT_RESOURCE,
            resource_id=created.id,
        )
        return CreatePatientOutput(patient=created)

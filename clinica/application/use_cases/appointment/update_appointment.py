import logging
from datetime import date
from typing import Any, Mapping

from clinica.application.dtos.appointment_dto import UpdateAppointmentOutput
from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.clock import Clock
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.appointment import UpdateAppointmentInputValidator
from clinica.domain.constants import RESOURCE_APPOINTMENT
from clinica.domain.errors import NotFoundError
from clinica.domain.services.patient_domain_service import PatientDomainService

AUDIT_RESOURCE = "appointment"

_FREE_TEXT_FIELDS = ("procedure", "clinical_evolution", "notes", "patient_name")


class UpdateAppointmentUseCase:
    """
    Actualiza un agendamiento aplicando solo los campos presentes en la entrada.

    Un None explícito limpia el campo; un campo omitido queda igual.
    """

    def __init__(
        self,
        appointment_repo: AppointmentRepo,
        patient_repo: PatientRepo,
        validator: UpdateAppointmentInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
        clock: Clock | None = None,
    ) -> None:
        self._appointment_repo = appointment_repo
        self._patient_repo = patient_repo
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> UpdateAppointmentOutput:
        validated = self._validator.validate(data)

        existing = await self._appointment_repo.find_by_id(validated.id)
        if existing is None:
            raise NotFoundError(RESOURCE_APPOINTMENT, validated.id)
        old_data = existing.to_json()

        changes = validated.changes()
        for key in _FREE_TEXT_FIELDS:
            if changes.get(key):
                changes[key] = self._sanitizer.sanitize_text(changes[key])

        today = self._clock.today() if self._clock else date.today()
        existing.update(today=today, **changes)
        updated = await self._appointment_repo.update(existing)
        self._logger.info(
            "Appointment updated",
            extra={"appointment_id": updated.id, "fields": sorted(changes)},
        )

        if changes.get("date") is not None and updated.date <= today:
            await run_best_effort(
                self._logger,
                "Failed to update patient last visit",
                PatientDomainService.update_last_visit(
                    self._patient_repo, updated.patient_id, updated.date, today=today
                ),
                patient_id=updated.patient_id,
            )
        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log(
                "update", AUDIT_RESOURCE, updated.id, old_data, updated.to_json()
            ),
            action="update",
            resource_type=AUDIT_RESOURCE,
            resource_id=updated.id,
        )
        return UpdateAppointmentOutput(appointment=updated)

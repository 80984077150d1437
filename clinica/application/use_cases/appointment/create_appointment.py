import logging
from decimal import Decimal
from typing import Any, Mapping

from clinica.application.dtos.appointment_dto import CreateAppointmentOutput
from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.auth_service import AuthService
from clinica.application.interfaces.clock import Clock
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.interfaces.sanitizer import Sanitizer
from clinica.application.use_cases.side_effects import run_best_effort
from clinica.application.validators.appointment import CreateAppointmentInputValidator
from clinica.domain.entities.appointment import Appointment
from clinica.domain.errors import ValidationError
from clinica.domain.services.appointment_domain_service import AppointmentDomainService
from clinica.domain.services.patient_domain_service import PatientDomainService

AUDIT_RESOURCE = "appointment"


class CreateAppointmentUseCase:
    """
    Crea un agendamiento.

    Flujo:
        1. Valida la entrada y rechaza fechas pasadas (salvo `allow_past_dates`).
        2. Resuelve el paciente (por ID, por nombre/email o creando uno nuevo).
        3. Construye y persiste el agendamiento con la copia de datos del paciente.
        4. Actualiza la última visita y audita (fallos solo se registran).
    """

    def __init__(
        self,
        appointment_repo: AppointmentRepo,
        patient_repo: PatientRepo,
        auth_service: AuthService,
        validator: CreateAppointmentInputValidator,
        sanitizer: Sanitizer,
        audit_service: AuditService,
        clock: Clock,
    ) -> None:
        self._appointment_repo = appointment_repo
        self._patient_repo = patient_repo
        self._auth_service = auth_service
        self._validator = validator
        self._sanitizer = sanitizer
        self._audit_service = audit_service
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, data: Mapping[str, Any]) -> CreateAppointmentOutput:
        validated = self._validator.validate(data)
        today = self._clock.today()

        if not AppointmentDomainService.can_create_appointment(
            validated.date, validated.allow_past_dates, today=today
        ):
            raise ValidationError(
                {"date": "Não é possível agendar no passado"},
                "Não é possível agendar no passado",
            )

        user_id = await self._auth_service.get_current_user_id()
        patient = await PatientDomainService.resolve_patient(
            self._patient_repo,
            patient_id=validated.patient_id,
            patient_name=self._clean(validated.patient_name),
            patient_email=validated.patient_email,
            patient_phone=validated.patient_phone,
            user_id=user_id,
        )

        appointment = Appointment.create(
            patient_id=patient.id,
            patient_name=str(patient.name),
            patient_email=str(patient.email) if patient.email else None,
            patient_phone=str(patient.phone) if patient.phone else None,
            clinic_id=validated.clinic_id,
            user_id=user_id,
            date=validated.date,
            time=validated.time,
            procedure=self._sanitizer.sanitize_text(validated.procedure),
            value=validated.value if validated.value is not None else Decimal("0"),
            currency=validated.currency,
            payment_type=validated.payment_type,
            payment_percentage=validated.payment_percentage,
            is_paid=validated.is_paid,
            payment_date=validated.payment_date,
            status=AppointmentDomainService.determine_status(validated.is_paid),
            clinical_evolution=self._clean(validated.clinical_evolution),
            notes=self._clean(validated.notes),
            today=today,
        )
        created = await self._appointment_repo.create(appointment)
        self._logger.info(
            "Appointment created",
            extra={
                "appointment_id": created.id,
                "patient_id": created.patient_id,
                "status": created.status.value,
            },
        )

        if created.date <= today:
            await run_best_effort(
                self._logger,
                "Failed to update patient last visit",
                PatientDomainService.update_last_visit(
                    self._patient_repo, created.patient_id, created.date, today=today
                ),
                patient_id=created.patient_id,
            )
        await run_best_effort(
            self._logger,
            "Failed to log audit action",
            self._audit_service.log("create", AUDIT_RESOURCE, created.id, None, created.to_json()),
            action="create",
            resource_type=AUDIT_RESOURCE,
            resource_id=created.id,
        )
        return CreateAppointmentOutput(appointment=created)

    def _clean(self, text: str | None) -> str | None:
        if text is None:
            return None
        return self._sanitizer.sanitize_text(text) or None

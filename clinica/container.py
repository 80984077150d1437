"""Construcción explícita de los casos de uso sobre los adaptadores in-memory."""

from functools import lru_cache
from typing import Any

from clinica.application.use_cases.appointment import (
    CreateAppointmentUseCase,
    DeleteAppointmentUseCase,
    GetAllAppointmentsUseCase,
    GetAppointmentUseCase,
    UpdateAppointmentUseCase,
)
from clinica.application.use_cases.clinic import (
    CreateClinicUseCase,
    DeleteClinicUseCase,
    GetAllClinicsUseCase,
    GetClinicUseCase,
    UpdateClinicUseCase,
)
from clinica.application.use_cases.patient import (
    CreatePatientUseCase,
    DeletePatientUseCase,
    GetAllPatientsUseCase,
    GetPatientUseCase,
    UpdatePatientUseCase,
)
from clinica.application.validators import (
    CreateAppointmentInputValidator,
    CreateClinicInputValidator,
    CreatePatientInputValidator,
    UpdateAppointmentInputValidator,
    UpdateClinicInputValidator,
    UpdatePatientInputValidator,
)
from clinica.config import Settings, get_settings
from clinica.infrastructure.in_memory import (
    InMemoryAppointmentRepo,
    InMemoryClinicRepo,
    InMemoryPatientRepo,
)
from clinica.infrastructure.services import (
    BleachSanitizer,
    ClockImpl,
    LoggingAuditService,
    StaticAuthService,
)


def build_bundle(settings: Settings) -> dict[str, Any]:
    auth_service = StaticAuthService(settings.current_user_id)
    return {
        "appointment_repo": InMemoryAppointmentRepo(),
        "patient_repo": InMemoryPatientRepo(),
        "clinic_repo": InMemoryClinicRepo(),
        "auth_service": auth_service,
        "audit_service": LoggingAuditService(auth_service),
        "sanitizer": BleachSanitizer(),
        "clock": ClockImpl(),
    }


@lru_cache(maxsize=1)
def _in_memory_bundle() -> dict[str, Any]:
    return build_bundle(get_settings())


def build_use_cases(bundle: dict[str, Any]) -> dict[str, Any]:
    appointment_repo = bundle["appointment_repo"]
    patient_repo = bundle["patient_repo"]
    clinic_repo = bundle["clinic_repo"]
    audit_service = bundle["audit_service"]
    sanitizer = bundle["sanitizer"]
    return {
        "create_appointment": CreateAppointmentUseCase(
            appointment_repo=appointment_repo,
            patient_repo=patient_repo,
            auth_service=bundle["auth_service"],
            validator=CreateAppointmentInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
            clock=bundle["clock"],
        ),
        "get_appointment": GetAppointmentUseCase(appointment_repo),
        "get_all_appointments": GetAllAppointmentsUseCase(appointment_repo),
        "update_appointment": UpdateAppointmentUseCase(
            appointment_repo=appointment_repo,
            patient_repo=patient_repo,
            validator=UpdateAppointmentInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
            clock=bundle["clock"],
        ),
        "delete_appointment": DeleteAppointmentUseCase(appointment_repo, audit_service),
        "create_patient": CreatePatientUseCase(
            patient_repo=patient_repo,
            auth_service=bundle["auth_service"],
            validator=CreatePatientInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
        ),
        "get_patient": GetPatientUseCase(patient_repo),
        "get_all_patients": GetAllPatientsUseCase(patient_repo),
        "update_patient": UpdatePatientUseCase(
            patient_repo=patient_repo,
            validator=UpdatePatientInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
        ),
        "delete_patient": DeletePatientUseCase(patient_repo, audit_service),
        "create_clinic": CreateClinicUseCase(
            clinic_repo=clinic_repo,
            validator=CreateClinicInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
        ),
        "get_clinic": GetClinicUseCase(clinic_repo),
        "get_all_clinics": GetAllClinicsUseCase(clinic_repo),
        "update_clinic": UpdateClinicUseCase(
            clinic_repo=clinic_repo,
            validator=UpdateClinicInputValidator(),
            sanitizer=sanitizer,
            audit_service=audit_service,
        ),
        "delete_clinic": DeleteClinicUseCase(clinic_repo, audit_service),
    }


def get_use_cases() -> dict[str, Any]:
    """Casos de uso sobre el bundle in-memory compartido del proceso."""
    return build_use_cases(_in_memory_bundle())

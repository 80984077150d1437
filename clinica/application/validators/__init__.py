"""Validadores de entrada de los casos de uso."""

from clinica.application.validators.appointment import (
    CreateAppointmentInputValidator,
    UpdateAppointmentInputValidator,
)
from clinica.application.validators.base import InputValidator, ValidationResult
from clinica.application.validators.clinic import (
    CreateClinicInputValidator,
    UpdateClinicInputValidator,
)
from clinica.application.validators.patient import (
    CreatePatientInputValidator,
    UpdatePatientInputValidator,
)

__all__ = [
    "InputValidator",
    "ValidationResult",
    "CreateAppointmentInputValidator",
    "UpdateAppointmentInputValidator",
    "CreatePatientInputValidator",
    "UpdatePatientInputValidator",
    "CreateClinicInputValidator",
    "UpdateClinicInputValidator",
]

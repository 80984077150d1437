"""Schemas Pydantic para validación de entradas de los casos de uso."""

from clinica.application.schemas.appointment import (
    CreateAppointmentSchema,
    UpdateAppointmentSchema,
)
from clinica.application.schemas.base import InputSchema
from clinica.application.schemas.clinic import CreateClinicSchema, UpdateClinicSchema
from clinica.application.schemas.patient import CreatePatientSchema, UpdatePatientSchema

__all__ = [
    "InputSchema",
    "CreateAppointmentSchema",
    "UpdateAppointmentSchema",
    "CreatePatientSchema",
    "UpdatePatientSchema",
    "CreateClinicSchema",
    "UpdateClinicSchema",
]

"""Entidades del dominio de clínicas."""

from clinica.domain.entities.appointment import Appointment
from clinica.domain.entities.clinic import Clinic, ClinicStatus
from clinica.domain.entities.patient import Patient

__all__ = [
    "Appointment",
    "Clinic",
    "ClinicStatus",
    "Patient",
]

"""Implementaciones in-memory para testing."""

from clinica.infrastructure.in_memory.appointment_repo import InMemoryAppointmentRepo
from clinica.infrastructure.in_memory.clinic_repo import InMemoryClinicRepo
from clinica.infrastructure.in_memory.patient_repo import InMemoryPatientRepo

__all__ = [
    "InMemoryAppointmentRepo",
    "InMemoryClinicRepo",
    "InMemoryPatientRepo",
]

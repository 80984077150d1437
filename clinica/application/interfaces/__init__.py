"""Interfaces (Puertos) de la capa de aplicación."""

from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.application.interfaces.audit_service import AuditService
from clinica.application.interfaces.auth_service import AuthService
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.application.interfaces.clock import Clock, FakeClock
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.application.interfaces.sanitizer import Sanitizer

__all__ = [
    # Repositories
    "AppointmentRepo",
    "ClinicRepo",
    "PatientRepo",
    # Services
    "AuditService",
    "AuthService",
    "Sanitizer",
    # Utilities
    "Clock",
    "FakeClock",
]

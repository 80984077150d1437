"""Servicios de dominio."""

from clinica.domain.services.appointment_domain_service import AppointmentDomainService
from clinica.domain.services.patient_domain_service import PatientDomainService

__all__ = [
    "AppointmentDomainService",
    "PatientDomainService",
]

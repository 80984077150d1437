"""
Capa de Dominio - Sistema de Clínicas.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Entidades del dominio (Clinic, Patient, Appointment)
- value_objects/: Objetos de valor inmutables (Email, Money, Time, etc.)
- services/: Servicios de dominio
- errors.py: Excepciones específicas del dominio
- constants.py: Constantes del dominio
"""

from clinica.domain.entities import Appointment, Clinic, ClinicStatus, Patient
from clinica.domain.errors import DomainError, NotFoundError, ValidationError
from clinica.domain.value_objects import (
    AppointmentStatus,
    Email,
    Money,
    Name,
    PaymentType,
    Phone,
    Procedure,
    Time,
)

__all__ = [
    # Entities
    "Appointment",
    "Clinic",
    "ClinicStatus",
    "Patient",
    # Value Objects
    "AppointmentStatus",
    "Email",
    "Money",
    "Name",
    "PaymentType",
    "Phone",
    "Procedure",
    "Time",
    # Errors
    "DomainError",
    "NotFoundError",
    "ValidationError",
]

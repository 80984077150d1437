"""Servicios de infraestructura."""

from clinica.infrastructure.services.audit_service_impl import LoggingAuditService
from clinica.infrastructure.services.auth_service_impl import StaticAuthService
from clinica.infrastructure.services.clock_impl import ClockImpl
from clinica.infrastructure.services.sanitizer_impl import BleachSanitizer

__all__ = [
    "BleachSanitizer",
    "ClockImpl",
    "LoggingAuditService",
    "StaticAuthService",
]

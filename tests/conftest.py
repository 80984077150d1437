"""
Configuración de pytest y fixtures compartidas.

Este módulo provee fixtures reutilizables para:
- Repositorios in-memory (agendamientos, pacientes, clínicas)
- Servicios de infraestructura (reloj fijo, auth, auditoría, sanitizador)
- Datos de prueba (pacientes y payloads de agendamiento)
"""

from datetime import datetime, timezone

import pytest

from clinica.application.interfaces.clock import FakeClock
from clinica.domain.entities.patient import Patient
from clinica.infrastructure.in_memory import (
    InMemoryAppointmentRepo,
    InMemoryClinicRepo,
    InMemoryPatientRepo,
)
from clinica.infrastructure.services import (
    BleachSanitizer,
    LoggingAuditService,
    StaticAuthService,
)

USER_ID = "11111111-1111-4111-8111-111111111111"

# ============================================================================
# INFRAESTRUCTURA
# ============================================================================


@pytest.fixture()
def clock():
    """Reloj fijo: 2025-06-15 12:00 UTC."""
    return FakeClock(datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture()
def appointment_repo():
    return InMemoryAppointmentRepo()


@pytest.fixture()
def patient_repo():
    return InMemoryPatientRepo()


@pytest.fixture()
def clinic_repo():
    return InMemoryClinicRepo()


@pytest.fixture()
def user_id():
    return USER_ID


@pytest.fixture()
def auth_service(user_id):
    return StaticAuthService(user_id)


@pytest.fixture()
def audit_service(auth_service):
    return LoggingAuditService(auth_service)


@pytest.fixture()
def sanitizer():
    return BleachSanitizer()


# ============================================================================
# DATOS DE PRUEBA
# ============================================================================


@pytest.fixture()
async def patient(patient_repo):
    """Paciente persistido en el repositorio in-memory."""
    return await patient_repo.create(
        Patient.create(
            name="Maria Silva",
            user_id=USER_ID,
            email="maria@example.com",
            phone="11987654321",
        )
    )


@pytest.fixture()
def appointment_payload():
    """Payload mínimo válido (camelCase, como llega desde el cliente)."""
    return {
        "patientName": "Maria Silva",
        "date": "2025-06-20",
        "time": "14:30",
        "procedure": "Limpeza",
        "value": "150.00",
    }

"""Implementación in-memory del repositorio de pacientes."""

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.domain.constants import RESOURCE_PATIENT
from clinica.domain.entities.patient import Patient
from clinica.domain.value_objects.name import Name
from clinica.infrastructure.in_memory.base import InMemoryStore


class InMemoryPatientRepo(PatientRepo):
    """Implementación in-memory del repositorio de pacientes para testing."""

    def __init__(self) -> None:
        self._store: InMemoryStore[Patient] = InMemoryStore(RESOURCE_PATIENT, Patient.from_json)

    async def find_all(self, options: QueryOptions | None = None) -> list[Patient] | Page[Patient]:
        return self._store.query(options)

    async def find_by_id(self, patient_id: str) -> Patient | None:
        return self._store.get(patient_id)

    async def find_by_name_or_email(self, name: str, email: str | None = None) -> Patient | None:
        """Coincidencia por nombre (sin distinguir mayúsculas) o por email exacto."""
        wanted_name = Name.normalize(name).casefold()
        wanted_email = email.strip().lower() if email else None

        def matches(record: dict) -> bool:
            if record["name"].casefold() == wanted_name:
                return True
            return wanted_email is not None and record.get("email") == wanted_email

        found = self._store.select(matches)
        return found[0] if found else None

    async def create(self, patient: Patient) -> Patient:
        return self._store.put(patient.id, patient.to_json())

    async def update(self, patient: Patient) -> Patient:
        return self._store.replace(patient.id, patient.to_json())

    async def delete(self, patient_id: str) -> None:
        self._store.remove(patient_id)

    def clear(self) -> None:
        self._store.clear()

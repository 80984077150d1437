"""Implementación in-memory del repositorio de clínicas."""

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.domain.constants import RESOURCE_CLINIC
from clinica.domain.entities.clinic import Clinic
from clinica.infrastructure.in_memory.base import InMemoryStore


class InMemoryClinicRepo(ClinicRepo):
    def __init__(self) -> None:
        self._store: InMemoryStore[Clinic] = InMemoryStore(RESOURCE_CLINIC, Clinic.from_json)

    async def find_all(self, options: QueryOptions | None = None) -> list[Clinic] | Page[Clinic]:
        return self._store.query(options)

    async def find_by_id(self, clinic_id: str) -> Clinic | None:
        return self._store.get(clinic_id)

    async def create(self, clinic: Clinic) -> Clinic:
        return self._store.put(clinic.id, clinic.to_json())

    async def update(self, clinic: Clinic) -> Clinic:
        return self._store.replace(clinic.id, clinic.to_json())

    async def delete(self, clinic_id: str) -> None:
        self._store.remove(clinic_id)

    def clear(self) -> None:
        self._store.clear()

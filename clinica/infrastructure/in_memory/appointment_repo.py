"""Implementación in-memory del repositorio de agendamientos."""

from datetime import date

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.domain.constants import RESOURCE_APPOINTMENT
from clinica.domain.entities.appointment import Appointment
from clinica.infrastructure.in_memory.base import InMemoryStore


class InMemoryAppointmentRepo(AppointmentRepo):
    """Implementación in-memory del repositorio de agendamientos para testing."""

    def __init__(self) -> None:
        self._store: InMemoryStore[Appointment] = InMemoryStore(
            RESOURCE_APPOINTMENT, Appointment.from_json
        )

    async def find_all(
        self, options: QueryOptions | None = None
    ) -> list[Appointment] | Page[Appointment]:
        return self._store.query(options)

    async def find_by_id(self, appointment_id: str) -> Appointment | None:
        return self._store.get(appointment_id)

    async def find_by_patient_id(self, patient_id: str) -> list[Appointment]:
        return self._sorted(self._store.select(lambda r: r["patient_id"] == patient_id))

    async def find_by_clinic_id(self, clinic_id: str) -> list[Appointment]:
        return self._sorted(self._store.select(lambda r: r["clinic_id"] == clinic_id))

    async def find_by_date(self, day: date) -> list[Appointment]:
        iso = day.isoformat()
        return self._sorted(self._store.select(lambda r: r["date"] == iso))

    async def find_by_date_range(self, start: date, end: date) -> list[Appointment]:
        """Rango inclusivo en ambos extremos."""
        low, high = start.isoformat(), end.isoformat()
        return self._sorted(self._store.select(lambda r: low <= r["date"] <= high))

    async def create(self, appointment: Appointment) -> Appointment:
        return self._store.put(appointment.id, appointment.to_json())

    async def update(self, appointment: Appointment) -> Appointment:
        return self._store.replace(appointment.id, appointment.to_json())

    async def delete(self, appointment_id: str) -> None:
        self._store.remove(appointment_id)

    def clear(self) -> None:
        self._store.clear()

    @staticmethod
    def _sorted(appointments: list[Appointment]) -> list[Appointment]:
        return sorted(appointments, key=lambda a: (a.date, a.time.value))

"""Interface AppointmentRepo - Puerto para repositorio de agendamientos."""

from abc import ABC, abstractmethod
from datetime import date

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.appointment import Appointment


class AppointmentRepo(ABC):
    """
    Puerto para el repositorio de agendamientos.

    Define las operaciones de persistencia del agregado Appointment.
    """

    @abstractmethod
    async def find_all(
        self, options: QueryOptions | None = None
    ) -> list[Appointment] | Page[Appointment]:
        """
        Lista agendamientos.

        Args:
            options: Filtros, orden y paginación.

        Returns:
            Lista simple, o Page cuando se pide paginación.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, appointment_id: str) -> Appointment | None:
        """
        Obtiene un agendamiento por su ID.

        Args:
            appointment_id: ID del agendamiento.

        Returns:
            Appointment o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_patient_id(self, patient_id: str) -> list[Appointment]:
        """Lista los agendamientos de un paciente."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_clinic_id(self, clinic_id: str) -> list[Appointment]:
        """Lista los agendamientos de una clínica."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_date(self, day: date) -> list[Appointment]:
        """Lista los agendamientos de un día."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_date_range(self, start: date, end: date) -> list[Appointment]:
        """
        Lista agendamientos entre dos fechas.

        Args:
            start: Fecha inicial (inclusive).
            end: Fecha final (inclusive).
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, appointment: Appointment) -> Appointment:
        """
        Persiste un nuevo agendamiento.

        Returns:
            Appointment tal como quedó guardado.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, appointment: Appointment) -> Appointment:
        """
        Actualiza un agendamiento existente.

        Returns:
            Appointment actualizado.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, appointment_id: str) -> None:
        """
        Elimina un agendamiento.

        Args:
            appointment_id: ID del agendamiento a eliminar.
        """
        raise NotImplementedError

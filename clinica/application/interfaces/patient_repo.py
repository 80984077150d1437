"""Interface PatientRepo - Puerto para repositorio de pacientes."""

from abc import ABC, abstractmethod

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.patient import Patient


class PatientRepo(ABC):
    """Puerto para el repositorio de pacientes."""

    @abstractmethod
    async def find_all(self, options: QueryOptions | None = None) -> list[Patient] | Page[Patient]:
        """
        Lista pacientes.

        Returns:
            Lista simple, o Page cuando se pide paginación.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, patient_id: str) -> Patient | None:
        """
        Obtiene un paciente por su ID.

        Returns:
            Patient o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_name_or_email(self, name: str, email: str | None = None) -> Patient | None:
        """
        Busca un paciente por nombre o email.

        Args:
            name: Nombre del paciente (comparación sin distinguir mayúsculas).
            email: Email opcional.

        Returns:
            El primer paciente que coincida, o None.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, patient: Patient) -> Patient:
        raise NotImplementedError

    @abstractmethod
    async def update(self, patient: Patient) -> Patient:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, patient_id: str) -> None:
        raise NotImplementedError

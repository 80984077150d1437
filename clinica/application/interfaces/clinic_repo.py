"""Interface ClinicRepo - Puerto para repositorio de clínicas."""

from abc import ABC, abstractmethod

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.clinic import Clinic


class ClinicRepo(ABC):
    """Puerto para el repositorio de clínicas."""

    @abstractmethod
    async def find_all(self, options: QueryOptions | None = None) -> list[Clinic] | Page[Clinic]:
        """
        Lista clínicas.

        Returns:
            Lista simple, o Page cuando se pide paginación.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, clinic_id: str) -> Clinic | None:
        """
        Obtiene una clínica por su ID.

        Returns:
            Clinic o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, clinic: Clinic) -> Clinic:
        raise NotImplementedError

    @abstractmethod
    async def update(self, clinic: Clinic) -> Clinic:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, clinic_id: str) -> None:
        raise NotImplementedError

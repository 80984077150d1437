from typing import Any

from clinica.application.dtos.appointment_dto import GetAppointmentOutput
from clinica.application.dtos.common import read_id
from clinica.application.interfaces.appointment_repo import AppointmentRepo
from clinica.domain.constants import RESOURCE_APPOINTMENT
from clinica.domain.errors import NotFoundError


class GetAppointmentUseCase:
    def __init__(self, appointment_repo: AppointmentRepo) -> None:
        self._appointment_repo = appointment_repo

    async def execute(self, data: Any) -> GetAppointmentOutput:
        """
        Obtiene un agendamiento por ID.

        Args:
            data: GetAppointmentInput o mapping con la clave `id`.

        Raises:
            NotFoundError: Si el agendamiento no existe.
        """
        appointment_id = read_id(data)
        appointment = await self._appointment_repo.find_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError(RESOURCE_APPOINTMENT, appointment_id)
        return GetAppointmentOutput(appointment=appointment)

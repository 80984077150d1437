from typing import Any

from clinica.application.dtos.appointment_dto import GetAllAppointmentsOutput
from clinica.application.dtos.common import read_options
from clinica.application.interfaces.appointment_repo import AppointmentRepo


class GetAllAppointmentsUseCase:
    def __init__(self, appointment_repo: AppointmentRepo) -> None:
        self._appointment_repo = appointment_repo

    async def execute(self, data: Any = None) -> GetAllAppointmentsOutput:
        """Lista agendamientos; devuelve Page cuando se piden `page`/`page_size`."""
        result = await self._appointment_repo.find_all(read_options(data))
        return GetAllAppointmentsOutput(appointments=result)

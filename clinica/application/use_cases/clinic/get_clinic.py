from typing import Any

from clinica.application.dtos.clinic_dto import GetClinicOutput
from clinica.application.dtos.common import read_id
from clinica.application.interfaces.clinic_repo import ClinicRepo
from clinica.domain.constants import RESOURCE_CLINIC
from clinica.domain.errors import NotFoundError


class GetClinicUseCase:
    def __init__(self, clinic_repo: ClinicRepo) -> None:
        self._clinic_repo = clinic_repo

    async def execute(self, data: Any) -> GetClinicOutput:
        clinic_id = read_id(data)
        clinic = await self._clinic_repo.find_by_id(clinic_id)
        if clinic is None:
            raise NotFoundError(RESOURCE_CLINIC, clinic_id)
        return GetClinicOutput(clinic=clinic)

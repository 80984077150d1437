from typing import Any

from clinica.application.dtos.clinic_dto import GetAllClinicsOutput
from clinica.application.dtos.common import read_options
from clinica.application.interfaces.clinic_repo import ClinicRepo


class GetAllClinicsUseCase:
    def __init__(self, clinic_repo: ClinicRepo) -> None:
        self._clinic_repo = clinic_repo

    async def execute(self, data: Any = None) -> GetAllClinicsOutput:
        result = await self._clinic_repo.find_all(read_options(data))
        return GetAllClinicsOutput(clinics=result)

from typing import Any

from clinica.application.dtos.common import read_options
from clinica.application.dtos.patient_dto import GetAllPatientsOutput
from clinica.application.interfaces.patient_repo import PatientRepo


class GetAllPatientsUseCase:
    def __init__(self, patient_repo: PatientRepo) -> None:
        self._patient_repo = patient_repo

    async def execute(self, data: Any = None) -> GetAllPatientsOutput:
        result = await self._patient_repo.find_all(read_options(data))
        return GetAllPatientsOutput(patients=result)

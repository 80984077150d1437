from typing import Any

from clinica.application.dtos.common import read_id
from clinica.application.dtos.patient_dto import GetPatientOutput
from clinica.application.interfaces.patient_repo import PatientRepo
from clinica.domain.constants import RESOURCE_PATIENT
from clinica.domain.errors import NotFoundError


class GetPatientUseCase:
    def __init__(self, patient_repo: PatientRepo) -> None:
        self._patient_repo = patient_repo

    async def execute(self, data: Any) -> GetPatientOutput:
        patient_id = read_id(data)
        patient = await self._patient_repo.find_by_id(patient_id)
        if patient is None:
            raise NotFoundError(RESOURCE_PATIENT, patient_id)
        return GetPatientOutput(patient=patient)

"""Casos de uso de pacientes."""

from clinica.application.use_cases.patient.create_patient import CreatePatientUseCase
from clinica.application.use_cases.patient.delete_patient import DeletePatientUseCase
from clinica.application.use_cases.patient.get_all_patients import GetAllPatientsUseCase
from clinica.application.use_cases.patient.get_patient import GetPatientUseCase
from clinica.application.use_cases.patient.update_patient import UpdatePatientUseCase

__all__ = [
    "CreatePatientUseCase",
    "DeletePatientUseCase",
    "GetAllPatientsUseCase",
    "GetPatientUseCase",
    "UpdatePatientUseCase",
]

"""Casos de uso de clínicas."""

from clinica.application.use_cases.clinic.create_clinic import CreateClinicUseCase
from clinica.application.use_cases.clinic.delete_clinic import DeleteClinicUseCase
from clinica.application.use_cases.clinic.get_all_clinics import GetAllClinicsUseCase
from clinica.application.use_cases.clinic.get_clinic import GetClinicUseCase
from clinica.application.use_cases.clinic.update_clinic import UpdateClinicUseCase

__all__ = [
    "CreateClinicUseCase",
    "DeleteClinicUseCase",
    "GetAllClinicsUseCase",
    "GetClinicUseCase",
    "UpdateClinicUseCase",
]

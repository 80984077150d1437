"""DTOs de los casos de uso de clínicas."""

from dataclasses import dataclass, field

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.clinic import Clinic


@dataclass
class GetClinicInput:
    id: str


@dataclass
class DeleteClinicInput:
    id: str


@dataclass
class GetAllClinicsInput:
    options: QueryOptions = field(default_factory=QueryOptions)


@dataclass
class CreateClinicOutput:
    clinic: Clinic


@dataclass
class GetClinicOutput:
    clinic: Clinic


@dataclass
class GetAllClinicsOutput:
    clinics: list[Clinic] | Page[Clinic]


@dataclass
class UpdateClinicOutput:
    clinic: Clinic


@dataclass
class DeleteClinicOutput:
    success: bool = True

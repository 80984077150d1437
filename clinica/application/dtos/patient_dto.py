"""DTOs de los casos de uso de pacientes."""

from dataclasses import dataclass, field

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.patient import Patient


@dataclass
class GetPatientInput:
    id: str


@dataclass
class DeletePatientInput:
    id: str


@dataclass
class GetAllPatientsInput:
    options: QueryOptions = field(default_factory=QueryOptions)


@dataclass
class CreatePatientOutput:
    patient: Patient


@dataclass
class GetPatientOutput:
    patient: Patient


@dataclass
class GetAllPatientsOutput:
    patients: list[Patient] | Page[Patient]


@dataclass
class UpdatePatientOutput:
    patient: Patient


@dataclass
class DeletePatientOutput:
    success: bool = True

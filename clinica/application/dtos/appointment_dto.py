"""DTOs de los casos de uso de agendamientos."""

from dataclasses import dataclass, field

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.entities.appointment import Appointment


@dataclass
class GetAppointmentInput:
    id: str


@dataclass
class DeleteAppointmentInput:
    id: str


@dataclass
class GetAllAppointmentsInput:
    options: QueryOptions = field(default_factory=QueryOptions)


@dataclass
class CreateAppointmentOutput:
    appointment: Appointment


@dataclass
class GetAppointmentOutput:
    appointment: Appointment


@dataclass
class GetAllAppointmentsOutput:
    """Lista simple o página, según las opciones de la consulta."""

    appointments: list[Appointment] | Page[Appointment]


@dataclass
class UpdateAppointmentOutput:
    appointment: Appointment


@dataclass
class DeleteAppointmentOutput:
    success: bool = True

"""Casos de uso de agendamientos."""

from clinica.application.use_cases.appointment.create_appointment import CreateAppointmentUseCase
from clinica.application.use_cases.appointment.delete_appointment import DeleteAppointmentUseCase
from clinica.application.use_cases.appointment.get_all_appointments import (
    GetAllAppointmentsUseCase,
)
from clinica.application.use_cases.appointment.get_appointment import GetAppointmentUseCase
from clinica.application.use_cases.appointment.update_appointment import UpdateAppointmentUseCase

__all__ = [
    "CreateAppointmentUseCase",
    "DeleteAppointmentUseCase",
    "GetAllAppointmentsUseCase",
    "GetAppointmentUseCase",
    "UpdateAppointmentUseCase",
]

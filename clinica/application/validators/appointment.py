"""Validadores de entrada de agendamientos."""

from clinica.application.schemas.appointment import (
    CreateAppointmentSchema,
    UpdateAppointmentSchema,
)
from clinica.application.validators.base import InputValidator


class CreateAppointmentInputValidator(InputValidator[CreateAppointmentSchema]):
    """
    Valida la creación de un agendamiento.

    Los opcionales omitidos quedan en None y `allow_past_dates` en False.
    """

    schema = CreateAppointmentSchema
    error_prefix = "Dados inválidos para criação de agendamento"


class UpdateAppointmentInputValidator(InputValidator[UpdateAppointmentSchema]):
    schema = UpdateAppointmentSchema
    error_prefix = "Dados inválidos para atualização de agendamento"

"""Validadores de entrada de pacientes."""

from clinica.application.schemas.patient import CreatePatientSchema, UpdatePatientSchema
from clinica.application.validators.base import InputValidator


class CreatePatientInputValidator(InputValidator[CreatePatientSchema]):
    schema = CreatePatientSchema
    error_prefix = "Dados inválidos para criação de paciente"


class UpdatePatientInputValidator(InputValidator[UpdatePatientSchema]):
    schema = UpdatePatientSchema
    error_prefix = "Dados inválidos para atualização de paciente"

"""Validadores de entrada de clínicas."""

from clinica.application.schemas.clinic import CreateClinicSchema, UpdateClinicSchema
from clinica.application.validators.base import InputValidator


class CreateClinicInputValidator(InputValidator[CreateClinicSchema]):
    schema = CreateClinicSchema
    error_prefix = "Dados inválidos para criação de clínica"


class UpdateClinicInputValidator(InputValidator[UpdateClinicSchema]):
    schema = UpdateClinicSchema
    error_prefix = "Dados inválidos para atualização de clínica"

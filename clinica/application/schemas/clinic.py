"""Schemas de entrada para clínicas."""

from typing import Any, Literal

from pydantic import Field, field_validator

from clinica.application.schemas.base import InputSchema, blank_to_none, coerce_email
from clinica.domain.constants import (
    MAX_ADDRESS_LENGTH,
    MAX_CLINIC_PHONE_LENGTH,
    MAX_NAME_LENGTH,
    MIN_NAME_LENGTH,
)

ClinicStatusValue = Literal["active", "inactive"]


class ClinicFields(InputSchema):
    phone: str | None = Field(default=None, min_length=10, max_length=MAX_CLINIC_PHONE_LENGTH)
    email: str | None = None
    address: str | None = Field(default=None, max_length=MAX_ADDRESS_LENGTH)
    status: ClinicStatusValue | None = None

    @field_validator("phone", "address", "status", mode="before")
    @classmethod
    def empty_to_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value: Any) -> str | None:
        return coerce_email(value)


class CreateClinicSchema(ClinicFields):
    name: str = Field(min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH)


class UpdateClinicSchema(ClinicFields):
    id: str
    name: str | None = Field(default=None, min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        if blank_to_none(value) is None:
            raise ValueError("ID da clínica é obrigatório")
        return value

    @property
    def provided(self) -> set[str]:
        return set(self.model_fields_set) - {"id"}

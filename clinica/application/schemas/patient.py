"""Schemas de entrada para pacientes."""

from typing import Any

from pydantic import Field, field_validator

from clinica.application.schemas.base import InputSchema, blank_to_none, coerce_email
from clinica.domain.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH

NAME_PATTERN = r"^[a-zA-ZÀ-ÿ\s]+$"
PHONE_PATTERN = r"^[0-9]{10,11}$"


class CreatePatientSchema(InputSchema):
    name: str = Field(min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH, pattern=NAME_PATTERN)
    email: str | None = None
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value: Any) -> str | None:
        return coerce_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def empty_phone(cls, value: Any) -> Any:
        return blank_to_none(value)


class UpdatePatientSchema(InputSchema):
    """`id` obligatorio; el resto opcional con registro de campos provistos."""

    id: str
    name: str | None = Field(
        default=None, min_length=MIN_NAME_LENGTH, max_length=MAX_NAME_LENGTH, pattern=NAME_PATTERN
    )
    email: str | None = None
    phone: str | None = Field(default=None, pattern=PHONE_PATTERN)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        if blank_to_none(value) is None:
            raise ValueError("ID do paciente é obrigatório")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, value: Any) -> str | None:
        return coerce_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def empty_phone(cls, value: Any) -> Any:
        return blank_to_none(value)

    @property
    def provided(self) -> set[str]:
        return set(self.model_fields_set) - {"id"}

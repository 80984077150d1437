"""Schemas de entrada para agendamientos."""

import datetime as dt
from decimal import Decimal
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from clinica.application.schemas.base import (
    InputSchema,
    blank_to_none,
    coerce_date,
    coerce_email,
    coerce_time,
    coerce_uuid,
)
from clinica.domain.constants import (
    DEFAULT_CURRENCY,
    MAX_CLINICAL_EVOLUTION_LENGTH,
    MAX_NOTES_LENGTH,
    MAX_PAYMENT_TYPE_LENGTH,
    MAX_PROCEDURE_LENGTH,
    PAYMENT_TYPE_FULL,
)

Currency = Literal["BRL", "USD", "EUR"]


class AppointmentFields(InputSchema):
    """Campos comunes de creación y actualización."""

    patient_id: str | None = None
    patient_name: str | None = Field(default=None, min_length=3)
    patient_email: str | None = None
    patient_phone: str | None = Field(default=None, min_length=10)
    clinic_id: str | None = None
    payment_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    payment_date: dt.date | None = None
    clinical_evolution: str | None = Field(default=None, max_length=MAX_CLINICAL_EVOLUTION_LENGTH)
    notes: str | None = Field(default=None, max_length=MAX_NOTES_LENGTH)

    @field_validator("patient_id", mode="before")
    @classmethod
    def validate_patient_id(cls, value: Any) -> str | None:
        return coerce_uuid(value, "do paciente")

    @field_validator("clinic_id", mode="before")
    @classmethod
    def validate_clinic_id(cls, value: Any) -> str | None:
        return coerce_uuid(value, "da clínica")

    @field_validator("patient_name", "patient_phone", mode="before")
    @classmethod
    def empty_to_none(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("patient_email", mode="before")
    @classmethod
    def validate_patient_email(cls, value: Any) -> str | None:
        return coerce_email(value)

    @field_validator("payment_date", mode="before")
    @classmethod
    def validate_payment_date(cls, value: Any) -> dt.date | None:
        return coerce_date(value)


class CreateAppointmentSchema(AppointmentFields):
    date: dt.date
    time: str
    procedure: str = Field(min_length=1, max_length=MAX_PROCEDURE_LENGTH)
    value: Decimal | None = Field(default=None, ge=0)
    currency: Currency = DEFAULT_CURRENCY
    payment_type: str = Field(default=PAYMENT_TYPE_FULL, max_length=MAX_PAYMENT_TYPE_LENGTH)
    is_paid: bool = False
    allow_past_dates: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> dt.date:
        parsed = coerce_date(value)
        if parsed is None:
            raise ValueError("Data é obrigatória")
        return parsed

    @field_validator("time", mode="before")
    @classmethod
    def validate_time(cls, value: Any) -> str:
        if value is None:
            raise ValueError("Hora é obrigatória")
        return coerce_time(value)

    @field_validator("currency", mode="before")
    @classmethod
    def default_currency(cls, value: Any) -> Any:
        return DEFAULT_CURRENCY if value is None else value

    @field_validator("payment_type", mode="before")
    @classmethod
    def default_payment_type(cls, value: Any) -> Any:
        return PAYMENT_TYPE_FULL if blank_to_none(value) is None else value

    @field_validator("is_paid", "allow_past_dates", mode="before")
    @classmethod
    def none_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @model_validator(mode="after")
    def require_patient(self) -> "CreateAppointmentSchema":
        if not self.patient_id and not self.patient_name:
            raise PydanticCustomError(
                "patient_required",
                "Paciente é obrigatório (forneça patientId ou patientName)",
                {"field": "patient"},
            )
        return self


class UpdateAppointmentSchema(AppointmentFields):
    """Todos los campos son opcionales salvo `id`; ver `provided`."""

    id: str
    date: dt.date | None = None
    time: str | None = None
    procedure: str | None = Field(default=None, min_length=1, max_length=MAX_PROCEDURE_LENGTH)
    value: Decimal | None = Field(default=None, ge=0)
    currency: Currency | None = None
    payment_type: str | None = Field(default=None, max_length=MAX_PAYMENT_TYPE_LENGTH)
    is_paid: bool | None = None
    status: Literal["scheduled", "pending", "paid", "cancelled"] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        if blank_to_none(value) is None:
            raise ValueError("ID do agendamento é obrigatório")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> dt.date | None:
        return coerce_date(value)

    @field_validator("time", mode="before")
    @classmethod
    def validate_time(cls, value: Any) -> str | None:
        return coerce_time(blank_to_none(value))

    @property
    def provided(self) -> set[str]:
        """Campos presentes en la entrada (un None explícito cuenta como presente)."""
        return set(self.model_fields_set) - {"id"}

    def changes(self) -> dict[str, Any]:
        """Campos provistos listos para `Appointment.update` (el paciente no se cambia)."""
        return {name: getattr(self, name) for name in self.provided - {"patient_id"}}

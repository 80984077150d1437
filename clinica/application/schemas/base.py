"""Base y coerciones compartidas por los schemas de entrada."""

import re
from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from clinica.domain.value_objects.email import Email
from clinica.domain.value_objects.time import Time

# La entrada solo admite HH:mm; la entidad además tolera HH:mm:ss.
INPUT_TIME_PATTERN = re.compile(r"^([0-1][0-9]|2[0-3]):[0-5][0-9]$")


class InputSchema(BaseModel):
    """
    Schema base para entradas no confiables.

    Acepta claves en snake_case o camelCase e ignora claves desconocidas.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def coerce_uuid(value: Any, label: str) -> str | None:
    value = blank_to_none(value)
    if value is None:
        return None
    if isinstance(value, UUID):
        return str(value)
    try:
        return str(UUID(str(value)))
    except ValueError as exc:
        raise ValueError(f"ID {label} inválido") from exc


def coerce_date(value: Any) -> date | None:
    """Acepta 'YYYY-MM-DD', datetime ISO-8601, date o datetime."""
    value = blank_to_none(value)
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            if len(value) == 10:
                return date.fromisoformat(value)
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise ValueError("Data inválida (formato esperado: YYYY-MM-DD)")


def coerce_email(value: Any) -> str | None:
    value = blank_to_none(value)
    if value is None:
        return None
    if not Email.is_valid(value):
        raise ValueError("Email inválido")
    return Email.normalize(value)


def coerce_time(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or INPUT_TIME_PATTERN.match(value.strip()) is None:
        raise ValueError("Hora inválida (formato esperado: HH:mm)")
    return Time.normalize(value)

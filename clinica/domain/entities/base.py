"""Utilidades compartidas por las entidades para leer y escribir registros."""

from datetime import date, datetime, timezone
from typing import Any, Mapping
from uuid import uuid4

from clinica.domain.errors import DomainError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def to_camel(key: str) -> str:
    """patient_id -> patientId"""
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def pick(record: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """
    Lee un campo aceptando snake_case o camelCase.

    Una clave presente con valor None se respeta (no se usa el default).
    """
    if key in record:
        return record[key]
    camel = to_camel(key)
    if camel in record:
        return record[camel]
    return default


def parse_date(value: date | datetime | str | None) -> date | None:
    """Acepta date, datetime, 'YYYY-MM-DD' o un datetime ISO-8601."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            if len(raw) == 10:
                return date.fromisoformat(raw)
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        except ValueError as exc:
            raise DomainError(f"Data inválida: {value}") from exc
    raise DomainError(f"Data inválida: {value}")


def parse_datetime(value: datetime | str | None) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as exc:
            raise DomainError(f"Data/hora inválida: {value}") from exc
    raise DomainError(f"Data/hora inválida: {value}")


def format_date(value: date | None) -> str | None:
    return value.isoformat() if value else None


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None

"""Entidad Clinic - clínica donde se realizan los agendamientos."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from clinica.domain.constants import MAX_ADDRESS_LENGTH
from clinica.domain.entities.base import (
    format_datetime,
    new_id,
    parse_datetime,
    pick,
    utcnow,
)
from clinica.domain.errors import DomainError, ValidationError
from clinica.domain.value_objects.email import Email
from clinica.domain.value_objects.name import Name
from clinica.domain.value_objects.phone import Phone


class ClinicStatus(str, Enum):
    """Estados posibles de una clínica."""

    ACTIVE = "active"
    INACTIVE = "inactive"

    def __str__(self) -> str:
        return self.value


def _clean_address(address: str | None) -> str | None:
    if address is None:
        return None
    address = address.strip()
    if len(address) > MAX_ADDRESS_LENGTH:
        raise ValidationError(
            {"address": address},
            f"Endereço deve ter no máximo {MAX_ADDRESS_LENGTH} caracteres",
        )
    return address or None


def _to_status(status: "str | ClinicStatus | None") -> ClinicStatus:
    if status is None or status == "":
        return ClinicStatus.ACTIVE
    try:
        return ClinicStatus(status)
    except ValueError as exc:
        raise DomainError("Status inválido", details={"status": status}) from exc


@dataclass
class Clinic:
    """
    Entidad que representa una clínica.

    Las mutaciones actualizan `updated_at` y retornan la propia entidad para
    permitir encadenar llamadas.
    """

    name: Name
    id: str = field(default_factory=new_id)
    address: str | None = None
    email: Email | None = None
    phone: Phone | None = None
    status: ClinicStatus = ClinicStatus.ACTIVE

    # Timestamps
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    # === Propiedades ===

    @property
    def is_active(self) -> bool:
        return self.status == ClinicStatus.ACTIVE

    # === Métodos de negocio ===

    def update_name(self, name: str) -> "Clinic":
        self.name = Name(name)
        return self._touch()

    def update_address(self, address: str | None) -> "Clinic":
        self.address = _clean_address(address)
        return self._touch()

    def update_email(self, email: str | None) -> "Clinic":
        """None o string vacío elimina el email."""
        self.email = Email.create(email)
        return self._touch()

    def update_phone(self, phone: str | None) -> "Clinic":
        """None o string vacío elimina el teléfono."""
        self.phone = Phone.create(phone)
        return self._touch()

    def activate(self) -> "Clinic":
        self.status = ClinicStatus.ACTIVE
        return self._touch()

    def deactivate(self) -> "Clinic":
        self.status = ClinicStatus.INACTIVE
        return self._touch()

    def _touch(self) -> "Clinic":
        self.updated_at = utcnow()
        return self

    # === Factories / serialización ===

    @classmethod
    def create(
        cls,
        name: str,
        id: str | None = None,
        address: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        status: str | ClinicStatus | None = None,
        created_at: datetime | str | None = None,
        updated_at: datetime | str | None = None,
    ) -> "Clinic":
        """
        Crea una clínica validando nombre, email y teléfono.

        Raises:
            ValidationError: Si algún campo tiene formato inválido.
            DomainError: Si el status no es active/inactive.
        """
        now = utcnow()
        created = parse_datetime(created_at) or now
        return cls(
            id=id or new_id(),
            name=Name(name),
            address=_clean_address(address),
            email=Email.create(email),
            phone=Phone.create(phone),
            status=_to_status(status),
            created_at=created,
            updated_at=parse_datetime(updated_at) or created,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": str(self.name),
            "address": self.address,
            "email": str(self.email) if self.email else None,
            "phone": str(self.phone) if self.phone else None,
            "status": self.status.value,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> "Clinic":
        """Reconstruye desde un registro; `updated_at` cae a `created_at` si falta."""
        created_at = pick(record, "created_at")
        return cls.create(
            id=pick(record, "id"),
            name=pick(record, "name"),
            address=pick(record, "address"),
            email=pick(record, "email"),
            phone=pick(record, "phone"),
            status=pick(record, "status"),
            created_at=created_at,
            updated_at=pick(record, "updated_at") or created_at,
        )

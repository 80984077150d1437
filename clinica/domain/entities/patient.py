"""Entidad Patient - paciente atendido por el usuario (profesional)."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

from clinica.domain.entities.base import (
    format_date,
    format_datetime,
    new_id,
    parse_date,
    parse_datetime,
    pick,
    utcnow,
)
from clinica.domain.errors import DomainError
from clinica.domain.value_objects.email import Email
from clinica.domain.value_objects.name import Name
from clinica.domain.value_objects.phone import Phone


@dataclass
class Patient:
    """
    Entidad que representa un paciente.

    Invariantes:
        - `user_id` (dueño del registro) es obligatorio.
        - `last_visit` no puede estar en el futuro.
    """

    name: Name
    user_id: str
    id: str = field(default_factory=new_id)
    email: Email | None = None
    phone: Phone | None = None
    last_visit: date | None = None

    # Timestamps
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.validate_invariants()

    def validate_invariants(self, today: date | None = None) -> None:
        if not isinstance(self.user_id, str) or not self.user_id.strip():
            raise DomainError("Usuário é obrigatório")
        if self.last_visit and self.last_visit > (today or date.today()):
            raise DomainError("Data de última visita não pode ser no futuro")

    # === Métodos de negocio ===

    def update_name(self, name: str) -> "Patient":
        self.name = Name(name)
        return self._touch()

    def update_email(self, email: str | None) -> "Patient":
        """None o string vacío elimina el email."""
        self.email = Email.create(email)
        return self._touch()

    def update_phone(self, phone: str | None) -> "Patient":
        self.phone = Phone.create(phone)
        return self._touch()

    def update_last_visit(
        self, visit: date | datetime | str | None, today: date | None = None
    ) -> "Patient":
        """
        Registra la fecha de la última visita.

        Args:
            visit: Fecha de la visita (None la elimina).
            today: Fecha de referencia; por defecto la fecha del sistema.

        Raises:
            DomainError: Si la fecha está en el futuro.
        """
        parsed = parse_date(visit)
        if parsed and parsed > (today or date.today()):
            raise DomainError("Data de última visita não pode ser no futuro")
        self.last_visit = parsed
        return self._touch()

    def _touch(self) -> "Patient":
        self.updated_at = utcnow()
        return self

    # === Factories / serialización ===

    @classmethod
    def create(
        cls,
        name: str,
        user_id: str,
        id: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        last_visit: date | datetime | str | None = None,
        created_at: datetime | str | None = None,
        updated_at: datetime | str | None = None,
    ) -> "Patient":
        """
        Crea un paciente validando sus campos.

        Raises:
            ValidationError: Nombre, email o teléfono con formato inválido.
            DomainError: Sin dueño o con última visita en el futuro.
        """
        now = utcnow()
        created = parse_datetime(created_at) or now
        return cls(
            id=id or new_id(),
            name=Name(name),
            user_id=user_id,
            email=Email.create(email),
            phone=Phone.create(phone),
            last_visit=parse_date(last_visit),
            created_at=created,
            updated_at=parse_datetime(updated_at) or created,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": str(self.name),
            "email": str(self.email) if self.email else None,
            "phone": str(self.phone) if self.phone else None,
            "user_id": self.user_id,
            "last_visit": format_date(self.last_visit),
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> "Patient":
        """
        Reconstruye desde un registro persistido.

        Raises:
            DomainError: Si el registro no trae `user_id`.
        """
        user_id = pick(record, "user_id")
        if not isinstance(user_id, str) or not user_id.strip():
            raise DomainError(
                "Patient.from_json: user_id é obrigatório",
                details={"id": pick(record, "id"), "name": pick(record, "name")},
            )
        return cls.create(
            id=pick(record, "id"),
            name=pick(record, "name"),
            user_id=user_id,
            email=pick(record, "email"),
            phone=pick(record, "phone"),
            last_visit=pick(record, "last_visit"),
            created_at=pick(record, "created_at"),
            updated_at=pick(record, "updated_at"),
        )

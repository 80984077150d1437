"""Entidad Appointment - agregado raíz de los agendamientos."""

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Mapping

from clinica.domain.constants import (
    CANCELLATION_NOTICE_HOURS,
    DEFAULT_CURRENCY,
    MAX_CLINICAL_EVOLUTION_LENGTH,
    MAX_NOTES_LENGTH,
    PAYMENT_TYPE_FULL,
)
from clinica.domain.entities.base import (
    format_date,
    format_datetime,
    new_id,
    parse_date,
    parse_datetime,
    pick,
    utcnow,
)
from clinica.domain.errors import DomainError, ValidationError
from clinica.domain.value_objects.appointment_status import AppointmentStatus
from clinica.domain.value_objects.money import Money
from clinica.domain.value_objects.payment_type import PaymentType
from clinica.domain.value_objects.procedure import Procedure
from clinica.domain.value_objects.time import Time

# Campos que aceptan None en update() para limpiar su valor
_NULLABLE_FIELDS = frozenset(
    {
        "patient_name",
        "patient_email",
        "patient_phone",
        "clinic_id",
        "payment_date",
        "clinical_evolution",
        "notes",
    }
)
_UPDATABLE_FIELDS = _NULLABLE_FIELDS | {
    "date",
    "time",
    "procedure",
    "value",
    "currency",
    "payment_type",
    "payment_percentage",
    "is_paid",
    "status",
}


def _check_length(field_name: str, value: str | None, limit: int, label: str) -> str | None:
    if value is not None and len(value) > limit:
        raise ValidationError(
            {field_name: f"{len(value)} caracteres"},
            f"{label} deve ter no máximo {limit} caracteres",
        )
    return value


@dataclass
class Appointment:
    """
    Entidad principal del dominio - Agregado Raíz.

    Guarda una copia de los datos del paciente (nombre, email, teléfono) tomada
    al momento de agendar, para no depender de cambios posteriores.
    """

    # Requeridos
    patient_id: str
    date: date
    time: Time
    procedure: Procedure
    value: Money

    # Identificadores
    id: str = field(default_factory=new_id)
    clinic_id: str | None = None
    user_id: str | None = None

    # Snapshot del paciente
    patient_name: str | None = None
    patient_email: str | None = None
    patient_phone: str | None = None

    # Pago
    payment_type: PaymentType = field(default_factory=PaymentType.full)
    is_paid: bool = False
    payment_date: date | None = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    # Texto libre
    clinical_evolution: str | None = None
    notes: str | None = None

    # Timestamps
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        self.status = AppointmentStatus.resolve(self.status, self.is_paid)
        self.validate_invariants()

    def validate_invariants(self) -> None:
        if not isinstance(self.patient_id, str) or not self.patient_id.strip():
            raise DomainError("Paciente é obrigatório")
        if not isinstance(self.date, date):
            raise DomainError("Data inválida")
        if self.is_paid and not self.payment_date:
            raise DomainError("Data de pagamento é obrigatória quando pago")
        _check_length(
            "clinical_evolution",
            self.clinical_evolution,
            MAX_CLINICAL_EVOLUTION_LENGTH,
            "Evolução clínica",
        )
        _check_length("notes", self.notes, MAX_NOTES_LENGTH, "Observações")

    # === Propiedades ===

    @property
    def scheduled_at(self) -> datetime:
        """Fecha y hora del agendamiento (sin zona horaria)."""
        return datetime.combine(self.date, time(self.time.hours, self.time.minutes))

    @property
    def is_cancelled(self) -> bool:
        return self.status == AppointmentStatus.CANCELLED

    # === Métodos de negocio ===

    def mark_as_paid(self, payment_date: date | datetime | str | None = None) -> "Appointment":
        """
        Marca el agendamiento como pagado.

        Raises:
            DomainError: Si ya estaba pagado.
        """
        if self.is_paid:
            raise DomainError("Agendamento já está pago")
        self.is_paid = True
        self.payment_date = parse_date(payment_date) or date.today()
        self.status = AppointmentStatus.PAID
        self._touch()
        self.validate_invariants()
        return self

    def calculate_received_value(self) -> Money:
        """Valor recibido según el tipo de pago (integral o porcentual)."""
        return self.payment_type.calculate_received_value(self.value)

    def can_be_cancelled(self, now: datetime | None = None) -> bool:
        """Solo se cancela con al menos 24 horas de antecedencia."""
        now = now or datetime.now()
        scheduled = self.scheduled_at
        if now.tzinfo is not None:
            scheduled = scheduled.replace(tzinfo=now.tzinfo)
        return scheduled - now >= timedelta(hours=CANCELLATION_NOTICE_HOURS)

    def cancel(self, now: datetime | None = None) -> "Appointment":
        if not self.can_be_cancelled(now):
            raise DomainError(
                f"Não é possível cancelar com menos de {CANCELLATION_NOTICE_HOURS}h de antecedência"
            )
        self.status = AppointmentStatus.CANCELLED
        return self._touch()

    def update(self, today: date | None = None, **changes: Any) -> "Appointment":
        """
        Aplica solo los campos presentes en `changes`.

        Un None explícito limpia los campos opcionales (clinic_id, notes,
        payment_date, ...); en campos obligatorios se ignora.

        Raises:
            DomainError: Campo desconocido o cambio que viola invariantes.
            ValidationError: Valor con formato inválido.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise DomainError(f"Campos não atualizáveis: {', '.join(sorted(unknown))}")

        # Los cambios se aplican sobre una copia; self solo cambia si todo es válido.
        draft = replace(self)

        for key in _NULLABLE_FIELDS - {"payment_date"}:
            if key in changes:
                setattr(draft, key, changes[key] or None)

        if changes.get("date") is not None:
            draft.date = parse_date(changes["date"])
        if changes.get("time") is not None:
            draft.time = Time(changes["time"])
        if changes.get("procedure") is not None:
            draft.procedure = Procedure(changes["procedure"])

        if changes.get("value") is not None or changes.get("currency") is not None:
            amount = changes.get("value")
            currency = changes.get("currency")
            draft.value = Money(
                amount=draft.value.amount if amount is None else amount,
                currency_code=currency or draft.value.currency_code,
            )

        if "payment_type" in changes or "payment_percentage" in changes:
            kind = changes.get("payment_type") or draft.payment_type.kind
            percentage = (
                changes["payment_percentage"]
                if "payment_percentage" in changes
                else draft.payment_type.percentage
            )
            draft.payment_type = PaymentType(kind=kind, percentage=percentage)

        if changes.get("is_paid") is not None:
            draft.is_paid = bool(changes["is_paid"])
            if draft.is_paid and not draft.payment_date:
                draft.payment_date = parse_date(changes.get("payment_date")) or today or date.today()

        if "payment_date" in changes:
            draft.payment_date = parse_date(changes["payment_date"])

        if changes.get("status") is not None:
            draft.status = AppointmentStatus.resolve(changes["status"], draft.is_paid)
        elif draft.is_paid and not draft.is_cancelled:
            draft.status = AppointmentStatus.PAID
        elif draft.status == AppointmentStatus.PAID:
            draft.status = AppointmentStatus.PENDING

        draft.validate_invariants()
        for item in fields(self):
            setattr(self, item.name, getattr(draft, item.name))
        return self._touch()

    def _touch(self) -> "Appointment":
        self.updated_at = utcnow()
        return self

    # === Factories / serialización ===

    @classmethod
    def create(
        cls,
        patient_id: str,
        date: date | datetime | str,
        time: str,
        procedure: str,
        value: Decimal | int | float | str,
        currency: str | None = None,
        payment_type: str | None = None,
        payment_percentage: Decimal | int | float | str | None = None,
        is_paid: bool = False,
        payment_date: date | datetime | str | None = None,
        status: str | AppointmentStatus | None = None,
        id: str | None = None,
        clinic_id: str | None = None,
        user_id: str | None = None,
        patient_name: str | None = None,
        patient_email: str | None = None,
        patient_phone: str | None = None,
        clinical_evolution: str | None = None,
        notes: str | None = None,
        created_at: datetime | str | None = None,
        updated_at: datetime | str | None = None,
        today: date | None = None,
    ) -> "Appointment":
        """
        Crea un agendamiento a partir de valores primitivos.

        Si `is_paid` es verdadero y no hay fecha de pago, se usa la fecha de hoy.

        Raises:
            ValidationError: Hora, procedimiento, valor o tipo de pago inválidos.
            DomainError: Sin paciente o con fecha inválida.
        """
        appointment_date = parse_date(date)
        if appointment_date is None:
            raise DomainError("Data inválida")

        paid_on = parse_date(payment_date)
        if is_paid and paid_on is None:
            paid_on = today or datetime.now().date()

        created = parse_datetime(created_at) or utcnow()
        return cls(
            id=id or new_id(),
            patient_id=patient_id,
            patient_name=patient_name,
            patient_email=patient_email,
            patient_phone=patient_phone,
            clinic_id=clinic_id or None,
            user_id=user_id,
            date=appointment_date,
            time=Time(time),
            procedure=Procedure(procedure),
            value=Money(amount=value, currency_code=currency or DEFAULT_CURRENCY),
            payment_type=PaymentType(
                kind=payment_type or PAYMENT_TYPE_FULL, percentage=payment_percentage
            ),
            is_paid=bool(is_paid),
            payment_date=paid_on,
            status=AppointmentStatus.resolve(status, bool(is_paid)),
            clinical_evolution=clinical_evolution,
            notes=notes,
            created_at=created,
            updated_at=parse_datetime(updated_at) or created,
        )

    def to_json(self) -> dict[str, Any]:
        percentage = self.payment_type.percentage
        return {
            "id": self.id,
            "patient_id": self.patient_id,
            "patient_name": self.patient_name,
            "patient_email": self.patient_email,
            "patient_phone": self.patient_phone,
            "clinic_id": self.clinic_id,
            "user_id": self.user_id,
            "date": format_date(self.date),
            "time": str(self.time),
            "procedure": str(self.procedure),
            "value": str(self.value.amount),
            "currency": self.value.currency_code,
            "payment_type": self.payment_type.kind,
            "payment_percentage": str(percentage) if percentage is not None else None,
            "is_paid": self.is_paid,
            "payment_date": format_date(self.payment_date),
            "status": self.status.value,
            "clinical_evolution": self.clinical_evolution,
            "notes": self.notes,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> "Appointment":
        return cls.create(
            id=pick(record, "id"),
            patient_id=pick(record, "patient_id"),
            patient_name=pick(record, "patient_name"),
            patient_email=pick(record, "patient_email"),
            patient_phone=pick(record, "patient_phone"),
            clinic_id=pick(record, "clinic_id"),
            user_id=pick(record, "user_id"),
            date=pick(record, "date"),
            time=pick(record, "time"),
            procedure=pick(record, "procedure"),
            value=pick(record, "value"),
            currency=pick(record, "currency"),
            payment_type=pick(record, "payment_type"),
            payment_percentage=pick(record, "payment_percentage"),
            is_paid=bool(pick(record, "is_paid", False)),
            payment_date=pick(record, "payment_date"),
            status=pick(record, "status"),
            clinical_evolution=pick(record, "clinical_evolution"),
            notes=pick(record, "notes"),
            created_at=pick(record, "created_at"),
            updated_at=pick(record, "updated_at"),
        )

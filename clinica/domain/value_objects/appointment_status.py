"""Estado de un agendamiento."""

from enum import Enum

from clinica.domain.errors import ValidationError


class AppointmentStatus(str, Enum):
    """Estados posibles de un agendamiento."""

    SCHEDULED = "scheduled"
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"

    @classmethod
    def resolve(cls, status: "str | AppointmentStatus | None", is_paid: bool) -> "AppointmentStatus":
        """
        Determina el estado efectivo.

        Un agendamiento cancelado sigue CANCELLED aunque esté pagado; fuera
        de eso, pagado siempre queda como PAID. Sin estado explícito se usa
        SCHEDULED.
        """
        parsed = None
        if status is not None:
            try:
                parsed = cls(status)
            except ValueError as exc:
                raise ValidationError({"status": status}, f"Status inválido: {status}") from exc
        if parsed is cls.CANCELLED:
            return parsed
        if is_paid:
            return cls.PAID
        return parsed or cls.SCHEDULED

    def __str__(self) -> str:
        return self.value

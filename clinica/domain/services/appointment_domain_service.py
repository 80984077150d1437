"""Reglas de negocio de agendamientos que no pertenecen a una sola entidad."""

from datetime import date, datetime

from clinica.domain.entities.base import parse_date
from clinica.domain.value_objects.appointment_status import AppointmentStatus


class AppointmentDomainService:
    """Servicio de dominio sin estado para agendamientos."""

    @staticmethod
    def determine_status(
        is_paid: bool, status: str | AppointmentStatus | None = None
    ) -> AppointmentStatus:
        """
        Determina el estado inicial de un agendamiento.

        Pagado -> PAID. Sin estado o "scheduled" sin pago -> PENDING.
        Cualquier otro estado explícito se mantiene.
        """
        if is_paid:
            return AppointmentStatus.PAID
        if status is None or status == AppointmentStatus.SCHEDULED:
            return AppointmentStatus.PENDING
        return AppointmentStatus.resolve(status, False)

    @staticmethod
    def can_create_appointment(
        appointment_date: date | datetime | str,
        allow_past_dates: bool = False,
        today: date | None = None,
    ) -> bool:
        """
        Verifica si un agendamiento puede crearse en la fecha dada.

        Args:
            appointment_date: Fecha del agendamiento.
            allow_past_dates: Permite fechas pasadas (histórico, importación).
            today: Fecha de referencia; por defecto la fecha del sistema.

        Returns:
            True si la fecha es hoy o futura, o si se permiten fechas pasadas.
        """
        if allow_past_dates:
            return True
        parsed = parse_date(appointment_date)
        if parsed is None:
            return False
        return parsed >= (today or date.today())

"""Implementación real del servicio de reloj."""

from datetime import date, datetime, timezone

from clinica.application.interfaces.clock import Clock


class ClockImpl(Clock):
    """
    Implementación real del Clock que usa el reloj del sistema.

    Para testing, usar FakeClock de application.interfaces.clock.
    """

    def now(self) -> datetime:
        """Retorna la fecha/hora actual con timezone UTC."""
        return datetime.now(timezone.utc)

    def today(self) -> date:
        """Retorna la fecha local actual; las citas se agendan en fecha local."""
        return date.today()

"""Value Object Time - horario de un agendamiento."""

import re
from dataclasses import dataclass
from typing import Any

from clinica.domain.errors import ValidationError

TIME_PATTERN = re.compile(r"^([0-1][0-9]|2[0-3]):[0-5][0-9](:[0-5][0-9])?$")


@dataclass(frozen=True)
class Time:
    """
    Value Object inmutable para horarios.

    Acepta HH:mm o HH:mm:ss y se normaliza a HH:mm.
    """

    value: str

    def __post_init__(self) -> None:
        if not Time.is_valid(self.value):
            raise ValidationError({"time": self.value}, f"Horário inválido: {self.value}")
        object.__setattr__(self, "value", Time.normalize(self.value))

    @staticmethod
    def is_valid(raw: Any) -> bool:
        if not isinstance(raw, str):
            return False
        return TIME_PATTERN.match(raw.strip()) is not None

    @staticmethod
    def normalize(raw: str) -> str:
        return raw.strip()[:5]

    @property
    def hours(self) -> int:
        return int(self.value[:2])

    @property
    def minutes(self) -> int:
        return int(self.value[3:5])

    def is_before(self, other: "Time") -> bool:
        return (self.hours, self.minutes) < (other.hours, other.minutes)

    def is_after(self, other: "Time") -> bool:
        return (self.hours, self.minutes) > (other.hours, other.minutes)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, raw: str | None) -> "Time | None":
        if not raw:
            return None
        return cls(raw)

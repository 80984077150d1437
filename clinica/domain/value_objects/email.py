"""Value Object Email - dirección de correo normalizada."""

import re
from dataclasses import dataclass
from typing import Any

from clinica.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """
    Value Object inmutable que representa un email.

    Se normaliza al construir (trim + minúsculas) y nunca existe una instancia
    con formato inválido: la construcción directa lanza ValidationError.
    Usar `Email.create` cuando el valor puede estar ausente.

    Attributes:
        value: Email normalizado (ej: joao@clinica.com).
    """

    value: str

    def __post_init__(self) -> None:
        if not Email.is_valid(self.value):
            raise ValidationError({"email": self.value}, f"Email inválido: {self.value}")
        object.__setattr__(self, "value", Email.normalize(self.value))

    @staticmethod
    def normalize(raw: str) -> str:
        return raw.strip().lower()

    @staticmethod
    def is_valid(raw: Any) -> bool:
        """Predicado puro: nunca lanza excepción."""
        if not isinstance(raw, str):
            return False
        return EMAIL_PATTERN.match(raw.strip()) is not None

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    def equals(self, other: object) -> bool:
        return isinstance(other, Email) and self.value == other.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, raw: str | None) -> "Email | None":
        """
        Factory tolerante a ausencia.

        Retorna None para None o string vacío; para cualquier otro valor aplica
        las mismas reglas que la construcción directa.
        """
        if raw is None or raw == "":
            return None
        return cls(raw)

"""Value Object Name - nombre de persona o clínica."""

from dataclasses import dataclass
from typing import Any

from clinica.domain.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH
from clinica.domain.errors import ValidationError


@dataclass(frozen=True)
class Name:
    """
    Value Object inmutable para nombres.

    Formato: entre 3 y 255 caracteres tras el trim. Se normaliza colapsando
    espacios y capitalizando cada palabra (ej: "joão  silva" -> "João Silva").
    """

    value: str

    def __post_init__(self) -> None:
        if not Name.is_valid(self.value):
            raise ValidationError({"name": self.value}, f"Nome inválido: {self.value}")
        object.__setattr__(self, "value", Name.normalize(self.value))

    @staticmethod
    def is_valid(raw: Any) -> bool:
        if not isinstance(raw, str):
            return False
        return MIN_NAME_LENGTH <= len(raw.strip()) <= MAX_NAME_LENGTH

    @staticmethod
    def normalize(raw: str) -> str:
        return " ".join(word[:1].upper() + word[1:].lower() for word in raw.split())

    @property
    def first_name(self) -> str:
        return self.value.split(" ")[0]

    @property
    def last_name(self) -> str:
        parts = self.value.split(" ")
        return parts[-1] if len(parts) > 1 else ""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, raw: str | None) -> "Name | None":
        if not raw:
            return None
        return cls(raw)

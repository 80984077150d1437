"""Value Object Phone - teléfono brasileño (DDD + número)."""

import re
from dataclasses import dataclass
from typing import Any

from clinica.domain.errors import ValidationError

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class Phone:
    """
    Value Object inmutable para teléfonos.

    Se almacena solo con dígitos; debe tener 10 (fijo) u 11 (móvil) dígitos.
    """

    value: str

    def __post_init__(self) -> None:
        if not Phone.is_valid(self.value):
            raise ValidationError({"phone": self.value}, f"Telefone inválido: {self.value}")
        object.__setattr__(self, "value", Phone.normalize(self.value))

    @staticmethod
    def normalize(raw: str) -> str:
        return _NON_DIGITS.sub("", raw)

    @staticmethod
    def is_valid(raw: Any) -> bool:
        if not isinstance(raw, str) or not raw:
            return False
        return 10 <= len(Phone.normalize(raw)) <= 11

    def format(self) -> str:
        """Formato de exhibición: (11) 99999-9999 o (11) 9999-9999."""
        digits = self.value
        if len(digits) == 11:
            return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def create(cls, raw: str | None) -> "Phone | None":
        if not raw:
            return None
        return cls(raw)

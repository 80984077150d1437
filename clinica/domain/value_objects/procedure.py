"""Value Object Procedure - procedimiento realizado en el agendamiento."""

from dataclasses import dataclass

from clinica.domain.constants import MAX_PROCEDURE_LENGTH
from clinica.domain.errors import ValidationError


@dataclass(frozen=True)
class Procedure:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError({"procedure": self.value}, "Procedimento é obrigatório")
        if len(self.value.strip()) > MAX_PROCEDURE_LENGTH:
            raise ValidationError(
                {"procedure": self.value},
                f"Procedimento deve ter no máximo {MAX_PROCEDURE_LENGTH} caracteres",
            )
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

"""Value Object PaymentType - modalidad de pago del agendamiento."""

from dataclasses import dataclass
from decimal import Decimal

from clinica.domain.constants import (
    MAX_PAYMENT_TYPE_LENGTH,
    PAYMENT_TYPE_FULL,
    PAYMENT_TYPE_PERCENTAGE,
)
from clinica.domain.errors import ValidationError
from clinica.domain.value_objects.money import Money


@dataclass(frozen=True)
class PaymentType:
    """
    Value Object inmutable para la modalidad de pago.

    El tipo es texto libre corto ("100" = valor integral). Solo el tipo
    "percentage" lleva porcentaje asociado, que debe estar entre 0 y 100.

    Attributes:
        kind: Identificador del tipo de pago (máx. 10 caracteres).
        percentage: Porcentaje recibido cuando kind == "percentage".
    """

    kind: str = PAYMENT_TYPE_FULL
    percentage: Decimal | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, str) or not self.kind.strip():
            raise ValidationError({"payment_type": self.kind}, "Tipo de pagamento é obrigatório")

        kind = self.kind.strip()
        if len(kind) > MAX_PAYMENT_TYPE_LENGTH:
            raise ValidationError(
                {"payment_type": self.kind},
                f"Tipo de pagamento deve ter no máximo {MAX_PAYMENT_TYPE_LENGTH} caracteres",
            )
        object.__setattr__(self, "kind", kind)

        if kind != PAYMENT_TYPE_PERCENTAGE:
            object.__setattr__(self, "percentage", None)
            return

        if self.percentage is None:
            raise ValidationError(
                {"payment_percentage": None},
                "Porcentagem é obrigatória para pagamento percentual",
            )
        percentage = Decimal(str(self.percentage))
        if percentage < 0 or percentage > 100:
            raise ValidationError(
                {"payment_percentage": str(self.percentage)},
                "Porcentagem deve estar entre 0 e 100",
            )
        object.__setattr__(self, "percentage", percentage)

    @property
    def is_percentage(self) -> bool:
        return self.kind == PAYMENT_TYPE_PERCENTAGE

    def calculate_received_value(self, total: Money) -> Money:
        """Valor efectivamente recibido según la modalidad."""
        if self.is_percentage:
            return total.percentage(self.percentage)
        return total

    def __str__(self) -> str:
        return self.kind

    @classmethod
    def full(cls) -> "PaymentType":
        return cls(kind=PAYMENT_TYPE_FULL)

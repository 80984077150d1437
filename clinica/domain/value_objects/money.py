"""Value Object Money - representa un valor monetario con su moneda."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from clinica.domain.constants import DEFAULT_CURRENCY, SUPPORTED_CURRENCIES
from clinica.domain.errors import DomainError, ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Value Object inmutable que representa un monto monetario.

    Attributes:
        amount: Monto decimal no negativo, redondeado a 2 decimales.
        currency_code: BRL, USD o EUR.
    """

    amount: Decimal
    currency_code: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        try:
            amount = (
                self.amount if isinstance(self.amount, Decimal) else Decimal(str(self.amount))
            )
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                {"amount": str(self.amount)}, "Valor deve ser um número positivo"
            ) from exc

        if not amount.is_finite() or amount < 0:
            raise ValidationError({"amount": str(self.amount)}, "Valor deve ser um número positivo")

        if self.currency_code not in SUPPORTED_CURRENCIES:
            raise ValidationError(
                {"currency": self.currency_code},
                f"Moeda não suportada: {self.currency_code}",
            )

        object.__setattr__(self, "amount", amount.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def _check_currency(self, other: "Money", operation: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"No se puede {operation} Money con {type(other)}")
        if self.currency_code != other.currency_code:
            raise DomainError(
                f"Não é possível {operation} moedas diferentes: "
                f"{self.currency_code} vs {other.currency_code}"
            )

    def add(self, other: "Money") -> "Money":
        self._check_currency(other, "somar")
        return Money(amount=self.amount + other.amount, currency_code=self.currency_code)

    def subtract(self, other: "Money") -> "Money":
        self._check_currency(other, "subtrair")
        result = self.amount - other.amount
        if result < 0:
            raise DomainError("Resultado não pode ser negativo")
        return Money(amount=result, currency_code=self.currency_code)

    def multiply(self, factor: Decimal | int | float) -> "Money":
        factor = Decimal(str(factor))
        if factor < 0:
            raise DomainError("Fator deve ser positivo")
        return Money(amount=self.amount * factor, currency_code=self.currency_code)

    def percentage(self, percent: Decimal | int | float) -> "Money":
        """Calcula un porcentaje del monto (ej: 50 -> la mitad)."""
        return Money(
            amount=self.amount * Decimal(str(percent)) / 100,
            currency_code=self.currency_code,
        )

    def is_greater_than(self, other: "Money") -> bool:
        self._check_currency(other, "comparar")
        return self.amount > other.amount

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency_code}"

    def to_dict(self) -> dict[str, str]:
        return {"amount": str(self.amount), "currency": self.currency_code}

    @classmethod
    def from_dict(cls, data: dict) -> "Money":
        return cls(amount=data["amount"], currency_code=data.get("currency", DEFAULT_CURRENCY))

    @classmethod
    def zero(cls, currency_code: str = DEFAULT_CURRENCY) -> "Money":
        """Crea un Money con valor cero."""
        return cls(amount=Decimal("0"), currency_code=currency_code)

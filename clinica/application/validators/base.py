"""Validador base: convierte entradas no confiables en schemas tipados."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from clinica.domain.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

ROOT_FIELD = "__root__"


@dataclass
class ValidationResult(Generic[SchemaT]):
    """Resultado etiquetado de `InputValidator.check`."""

    ok: bool
    value: SchemaT | None = None
    violations: list[dict[str, str]] = field(default_factory=list)


class InputValidator(Generic[SchemaT]):
    """
    Valida un mapping (claves snake_case o camelCase) contra un schema Pydantic.

    Las subclases definen `schema` y `error_prefix`. La entrada nunca se modifica.
    """

    schema: ClassVar[type[BaseModel]]
    error_prefix: ClassVar[str] = "Dados inválidos"

    def validate(self, data: Any) -> SchemaT:
        """
        Parsea la entrada.

        Raises:
            ValidationError: Con la lista de violaciones {field, message, type}.
        """
        result = self.check(data)
        if not result.ok:
            raise ValidationError(result.violations, self.summarize(result.violations))
        return result.value

    def check(self, data: Any) -> ValidationResult[SchemaT]:
        """Igual que `validate` pero sin lanzar excepciones."""
        if not isinstance(data, Mapping):
            return ValidationResult(
                ok=False,
                violations=[
                    {"field": ROOT_FIELD, "message": "Entrada deve ser um objeto", "type": "type_error"}
                ],
            )
        try:
            value = self.schema.model_validate(dict(data))
        except PydanticValidationError as exc:
            return ValidationResult(ok=False, violations=self._violations(exc))
        return ValidationResult(ok=True, value=value)

    def summarize(self, violations: list[dict[str, str]]) -> str:
        details = "; ".join(f"{v['field']}: {v['message']}" for v in violations)
        return f"{self.error_prefix}: {details}"

    def _violations(self, exc: PydanticValidationError) -> list[dict[str, str]]:
        names = {}
        for name, info in self.schema.model_fields.items():
            names[name] = name
            if info.alias:
                names[info.alias] = name

        violations = []
        for error in exc.errors():
            ctx = error.get("ctx") or {}
            loc = [str(part) for part in error["loc"]]
            if loc:
                loc[0] = names.get(loc[0], loc[0])
                field_name = ".".join(loc)
            else:
                field_name = str(ctx.get("field", ROOT_FIELD))

            message = error["msg"]
            if error["type"] == "value_error" and "error" in ctx:
                message = str(ctx["error"])
            violations.append({"field": field_name, "message": message, "type": error["type"]})
        return violations

"""Excepciones de dominio para el sistema de clínicas y agendamientos."""

from typing import Any


class DomainError(Exception):
    """Clase base para todos los errores de dominio y de aplicación."""

    def __init__(
        self,
        message: str = "Violação de regra de negócio",
        code: str | None = None,
        details: Any = None,
    ):
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serializa el error para la capa que lo presenta al usuario."""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


# === Errores de Validación ===


class ValidationError(DomainError):
    """
    Error de validación de datos de entrada o de invariantes de formato.

    Attributes:
        errors: Detalle por campo. Puede ser un dict {campo: mensaje} o la
            lista estructurada de violaciones producida por un validador.
    """

    def __init__(
        self,
        errors: dict[str, Any] | list[dict[str, Any]],
        message: str = "Dados inválidos",
    ):
        super().__init__(message=message, code="VALIDATION_ERROR", details=errors)
        self.errors = errors

    @property
    def fields(self) -> list[str]:
        """Nombres de los campos que fallaron."""
        if isinstance(self.errors, dict):
            return list(self.errors)
        return [str(error.get("field", "")) for error in self.errors]


# === Errores de Recursos ===


class NotFoundError(DomainError):
    """El recurso buscado por identidad no existe."""

    def __init__(self, resource: str = "Recurso", id: str | None = None):
        message = (
            f"{resource} com ID {id} não encontrado" if id else f"{resource} não encontrado"
        )
        super().__init__(
            message=message,
            code="NOT_FOUND",
            details={"resource": resource, "id": id},
        )
        self.resource = resource
        self.id = id

"""Lectura de entradas comunes a varios casos de uso."""

from typing import Any, Mapping

from clinica.application.dtos.pagination import QueryOptions
from clinica.domain.errors import ValidationError


def read_id(data: Any) -> str:
    """
    Extrae el `id` de un input (dataclass con atributo `id` o mapping).

    Raises:
        ValidationError: Si el ID está ausente o vacío.
    """
    value = data.get("id") if isinstance(data, Mapping) else getattr(data, "id", None)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError({"id": "ID é obrigatório"}, "ID é obrigatório")
    return value.strip()


def read_options(data: Any) -> QueryOptions:
    """Acepta None, QueryOptions, un mapping de opciones o un input con `options`."""
    if data is None:
        return QueryOptions()
    if isinstance(data, QueryOptions):
        return data
    if isinstance(data, Mapping):
        options = data.get("options", data)
    else:
        options = getattr(data, "options", None)
    if isinstance(options, QueryOptions):
        return options
    return QueryOptions.from_mapping(options)

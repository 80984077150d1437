"""Opciones de consulta y resultados paginados."""

import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_ORDER_BY = "created_at"


@dataclass
class QueryOptions:
    """
    Opciones de `find_all`.

    Sin `page` ni `page_size` el repositorio devuelve una lista simple.
    `filters` compara por igualdad contra el registro serializado.
    """

    page: int | None = None
    page_size: int | None = None
    order_by: str = DEFAULT_ORDER_BY
    descending: bool = True
    filters: dict[str, Any] = field(default_factory=dict)
    limit: int | None = None

    @property
    def is_paginated(self) -> bool:
        return self.page is not None or self.page_size is not None

    @classmethod
    def from_mapping(cls, options: dict[str, Any] | None) -> "QueryOptions":
        """Acepta un dict con claves snake_case o camelCase."""
        if not options:
            return cls()
        direction = options.get("order_direction", options.get("orderDirection", "desc"))
        return cls(
            page=options.get("page"),
            page_size=options.get("page_size", options.get("pageSize")),
            order_by=options.get("order_by", options.get("orderBy")) or DEFAULT_ORDER_BY,
            descending=str(direction).lower() != "asc",
            filters=dict(options.get("filters") or {}),
            limit=options.get("limit"),
        )


@dataclass
class Page(Generic[T]):
    """Página de resultados con metadatos de paginación."""

    data: list[T]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "page_size": self.page_size,
            "total": self.total,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_prev": self.has_prev,
        }

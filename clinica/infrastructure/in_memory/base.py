"""Almacenamiento in-memory compartido por los repositorios de testing."""

from typing import Any, Callable, Generic, TypeVar

from clinica.application.dtos.pagination import Page, QueryOptions
from clinica.domain.errors import NotFoundError

E = TypeVar("E")


class InMemoryStore(Generic[E]):
    """
    Guarda entidades serializadas (`to_json`) indexadas por ID.

    Cada lectura reconstruye la entidad con `from_json`, de modo que los
    cambios hechos sobre un objeto devuelto no alteran lo almacenado hasta
    que se llama a `update`.
    """

    def __init__(self, resource: str, loader: Callable[[dict[str, Any]], E]) -> None:
        self._resource = resource
        self._loader = loader
        self._records: dict[str, dict[str, Any]] = {}

    def get(self, entity_id: str) -> E | None:
        record = self._records.get(entity_id)
        return self._loader(record) if record is not None else None

    def put(self, entity_id: str, record: dict[str, Any]) -> E:
        self._records[entity_id] = dict(record)
        return self._loader(self._records[entity_id])

    def replace(self, entity_id: str | None, record: dict[str, Any]) -> E:
        if entity_id is None or entity_id not in self._records:
            raise NotFoundError(self._resource, entity_id)
        return self.put(entity_id, record)

    def remove(self, entity_id: str) -> None:
        if entity_id not in self._records:
            raise NotFoundError(self._resource, entity_id)
        del self._records[entity_id]

    def select(self, predicate: Callable[[dict[str, Any]], bool]) -> list[E]:
        return [self._loader(r) for r in self._records.values() if predicate(r)]

    def query(self, options: QueryOptions | None = None) -> list[E] | Page[E]:
        """Aplica filtros por igualdad, orden, límite y paginación."""
        options = options or QueryOptions()
        records = [
            r for r in self._records.values()
            if all(r.get(key) == value for key, value in options.filters.items())
        ]
        # Los None van siempre al final
        present = [r for r in records if r.get(options.order_by) is not None]
        missing = [r for r in records if r.get(options.order_by) is None]
        present.sort(key=lambda r: r[options.order_by], reverse=options.descending)
        records = present + missing

        if options.limit is not None:
            records = records[: options.limit]

        if not options.is_paginated:
            return [self._loader(r) for r in records]

        page = max(options.page or 1, 1)
        page_size = max(options.page_size or 10, 1)
        start = (page - 1) * page_size
        chunk = records[start:start + page_size]
        return Page(
            data=[self._loader(r) for r in chunk],
            page=page,
            page_size=page_size,
            total=len(records),
        )

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

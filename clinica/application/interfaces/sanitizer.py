"""Interface Sanitizer - Puerto para limpiar texto libre."""

from abc import ABC, abstractmethod
from typing import Any


class Sanitizer(ABC):
    """Puerto para sanitizar texto ingresado por el usuario."""

    @abstractmethod
    def sanitize_text(self, text: str) -> str:
        """
        Elimina todo el markup HTML manteniendo el contenido.

        Raises:
            TypeError: Si `text` no es un string.
        """
        raise NotImplementedError

    @abstractmethod
    def sanitize_html(self, html: str) -> str:
        """Conserva solo las etiquetas de formato permitidas."""
        raise NotImplementedError

    def deep_sanitize(self, data: Any) -> Any:
        """Sanitiza recursivamente strings dentro de dicts y listas."""
        if isinstance(data, str):
            return self.sanitize_text(data)
        if isinstance(data, list):
            return [self.deep_sanitize(item) for item in data]
        if isinstance(data, dict):
            return {key: self.deep_sanitize(value) for key, value in data.items()}
        return data

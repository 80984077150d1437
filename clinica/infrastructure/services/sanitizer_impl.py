"""Sanitizador de texto basado en bleach."""

import re
from html import unescape

import bleach

from clinica.application.interfaces.sanitizer import Sanitizer

DEFAULT_ALLOWED_TAGS = frozenset({
    "p", "br", "strong", "em", "u", "h1", "h2", "h3", "ul", "ol", "li",
})

# bleach con strip=True conserva el cuerpo de <script>/<style>
_SCRIPT_BLOCK = re.compile(r"<(script|style)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)


class BleachSanitizer(Sanitizer):
    """
    Sanitizer que elimina markup con bleach.

    `sanitize_text` quita todas las etiquetas y devuelve texto plano, con
    los caracteres tal como fueron escritos (`<`, `&`). `sanitize_html`
    conserva solo las etiquetas de formato permitidas, sin atributos, y deja
    el texto escapado. En ambos casos los bloques <script> y <style> se
    eliminan con su contenido.
    """

    def __init__(self, allowed_tags: frozenset[str] | set[str] | None = None) -> None:
        self._allowed_tags = frozenset(allowed_tags or DEFAULT_ALLOWED_TAGS)

    def sanitize_text(self, text: str) -> str:
        if not isinstance(text, str):
            raise TypeError("sanitize_text expects a string")
        if not text:
            return ""
        cleaned = bleach.clean(
            _SCRIPT_BLOCK.sub("", text),
            tags=set(),
            attributes={},
            strip=True,
            strip_comments=True,
        )
        return unescape(cleaned).strip()

    def sanitize_html(self, html: str) -> str:
        if not isinstance(html, str):
            raise TypeError("sanitize_html expects a string")
        if not html:
            return ""
        return bleach.clean(
            _SCRIPT_BLOCK.sub("", html),
            tags=self._allowed_tags,
            attributes={},
            strip=True,
            strip_comments=True,
        )

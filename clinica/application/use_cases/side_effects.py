"""Efectos secundarios de mejor esfuerzo (auditoría, última visita)."""

import logging
from typing import Any, Awaitable


async def run_best_effort(
    logger: logging.Logger, description: str, operation: Awaitable[Any], **context: Any
) -> None:
    """
    Ejecuta `operation`; si falla se registra un warning y el caso de uso continúa.
    """
    try:
        await operation
    except Exception:
        logger.warning(description, exc_info=True, extra=context)

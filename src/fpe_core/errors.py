"""
src/fpe_core/errors.py
Jerarquía de Excepciones de fpe_core.
"""
from typing import Optional


class ConsListError(Exception):
    """Error base para todas las operaciones sobre ConsList."""


class EmptyListError(ConsListError, IndexError):
    """
    Operación que requiere al menos un elemento invocada sobre Nil.
    Hereda de IndexError para que `except IndexError` siga funcionando.
    """

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        super().__init__(message or f"{operation}() of empty list")

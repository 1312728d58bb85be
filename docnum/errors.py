"""Exceptions raised by docnum when strict validation is enabled."""

from __future__ import annotations


class NumberingError(Exception):
    """Raised in strict mode when a navigation argument is rejected.

    Attributes:
        operation: Name of the engine operation that rejected the input.
        value: The rejected argument.
    """

    def __init__(self, operation: str, value: object, reason: str) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation}({value!r}): {reason}")

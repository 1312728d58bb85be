"""
Pytest configuration and fixtures for docnum tests.
"""

import pytest

from docnum import DocNumerator, NumberingConfig


@pytest.fixture
def numerator() -> DocNumerator:
    """Engine with default formatting, starting at "1"."""
    return DocNumerator()


@pytest.fixture
def plain() -> DocNumerator:
    """Engine without indent or ending, so renders are bare numbers."""
    return DocNumerator(config=NumberingConfig(indent="", ending=""))


@pytest.fixture
def strict() -> DocNumerator:
    """Engine that rejects invalid navigation arguments."""
    return DocNumerator(config=NumberingConfig(indent="", ending="", strict=True))

"""
Seed parsing and rendering for position vectors.

A position vector is a list of non-negative ints, most significant level
first: [1, 2, 3] renders as "1.2.3" with the default separator.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from docnum.config import DEFAULT_START_FROM

logger = logging.getLogger(__name__)

# Seeds always use a literal dot, whatever the rendering separator is
SEED_SEPARATOR = "."

_NUMERIC_TOKEN_RE = re.compile(r"^\d+$")


def is_numeric_token(token: str) -> bool:
    """Return True when *token* is a run of decimal digits.

    Surrounding whitespace is ignored; signs, decimals and empty strings
    are not numeric.
    """
    return bool(_NUMERIC_TOKEN_RE.match(token.strip()))


def _token_to_int(token: str) -> int | None:
    """Convert a digit-run token, or None when it is not usable.

    Digit runs past the interpreter's int conversion limit count as
    non-numeric.
    """
    if not is_numeric_token(token):
        return None
    try:
        return int(token)
    except ValueError:
        return None


def parse_seed(seed: str | None, start_from: int) -> list[int]:
    """Turn a seed like "12.1.2" into a position vector.

    Non-numeric tokens become *start_from*. That includes the empty token
    left by a trailing dot, so "12." yields [12, start_from].

    Args:
        seed: Dot-separated seed string. None means "1".
        start_from: Value substituted for non-numeric tokens.

    Returns:
        A new position vector with at least one element.
    """
    raw = "1" if seed is None else seed
    position: list[int] = []
    for token in raw.split(SEED_SEPARATOR):
        value = _token_to_int(token)
        if value is None:
            logger.debug(
                "Seed token %.40r is not numeric, using %r",
                token,
                start_from,
            )
            value = start_from
        position.append(value)
    return position


def coerce_level(value: object) -> int | None:
    """Interpret *value* as a level number, or None if it is not one.

    Accepts ints (but not bools) and digit strings.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _token_to_int(value)
    return None


def coerce_start_from(value: object) -> int:
    """Interpret *value* as a level seed, falling back to DEFAULT_START_FROM.

    Accepts non-negative ints (but not bools) and digit strings.
    """
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    if isinstance(value, str):
        converted = _token_to_int(value)
        if converted is not None:
            return converted
    logger.debug(
        "Start value %.40r is not a non-negative integer, using %d",
        value,
        DEFAULT_START_FROM,
    )
    return DEFAULT_START_FROM


def render_position(position: Sequence[int], separator: str) -> str:
    """Join level values with *separator*."""
    return separator.join(str(value) for value in position)

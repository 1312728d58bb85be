"""
Hierarchical numbering engine.

DocNumerator keeps a position vector such as [1, 2, 3] and moves it
around as a document generator enters and leaves nested items. Every
navigation call returns the rendered number, ready to embed in text:

    numerator = DocNumerator()
    numerator.get()     # "&nbsp;...1.&nbsp;"
    numerator.push()    # "&nbsp;...1.1.&nbsp;"
    numerator.next()    # "&nbsp;...1.2.&nbsp;"
    numerator.pop()     # "&nbsp;...2.&nbsp;"

Malformed input never raises unless the config enables strict mode.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from docnum.anchors import AnchorRegistry
from docnum.config import NumberingConfig
from docnum.errors import NumberingError
from docnum.position import (
    coerce_level,
    coerce_start_from,
    parse_seed,
    render_position,
)

logger = logging.getLogger(__name__)


class DocNumerator:
    """Multi-level counter with anchors for cross-references.

    Args:
        start_value: Optional seed like "12.1.2". A trailing dot adds a
            sub-level seeded at ``config.start_from``.
        config: Rendering and seeding options. Defaults to NumberingConfig().
            The engine keeps its own copy, so setters never reach other
            engines built from the same config.
    """

    def __init__(
        self,
        start_value: str | None = None,
        config: NumberingConfig | None = None,
    ) -> None:
        self.config = replace(config) if config is not None else NumberingConfig()
        self.config.start_from = coerce_start_from(self.config.start_from)
        self._anchors = AnchorRegistry()
        self._position: list[int] = []
        self.reset(start_value)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_separator(self, separator: str) -> None:
        """Use *separator* between levels in subsequent renders."""
        self.config.separator = separator

    def set_indent(self, indent: str) -> None:
        """Use *indent* as the prefix of subsequent renders."""
        self.config.indent = indent

    def set_ending(self, ending: str) -> None:
        """Use *ending* as the suffix of subsequent renders."""
        self.config.ending = ending

    def set_start_from(self, start_from: int) -> None:
        """Seed levels created from now on with *start_from*.

        Levels that already exist keep their values. Anything other than a
        non-negative integer falls back to the default start value.
        """
        self.config.start_from = coerce_start_from(start_from)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def reset(self, start_value: str | None = None) -> str:
        """Replace the position with one parsed from *start_value*.

        Anchors captured so far are kept.

        Args:
            start_value: Dot-separated seed. None starts at "1".

        Returns:
            The rendered number.
        """
        self._position = parse_seed(start_value, self.config.start_from)
        logger.debug("Reset to %s", self._position)
        return self.get()

    def start(self, start_value: str | None = None) -> str:
        """Alias of reset()."""
        return self.reset(start_value)

    def next(self) -> str:
        """Advance to the next item on the current level."""
        return self._increase()

    def push(self, count: int = 1) -> str:
        """Open *count* nested levels, each seeded at ``start_from``.

        Existing levels are not incremented.

        Raises:
            NumberingError: In strict mode, when *count* is negative.
        """
        self._check_count("push", count)
        for _ in range(count):
            self._position.append(self.config.start_from)
        logger.debug("Pushed %d level(s), now at %s", max(count, 0), self._position)
        return self.get()

    def pop(self, count: int = 1) -> str:
        """Close *count* levels and advance the level that becomes current.

        Closing as many levels as are open (or more) collapses to level 1,
        the same way ``to(1)`` does.

        Raises:
            NumberingError: In strict mode, when *count* is negative.
        """
        self._check_count("pop", count)
        if count >= self.get_level():
            logger.debug(
                "pop(%d) at depth %d collapses to level 1", count, self.get_level()
            )
            return self.to(1)
        if count > 0:
            del self._position[-count:]
        return self._increase()

    def to(self, level_number: Any) -> str:
        """Jump to *level_number*.

        Deeper levels are pushed, shallower ones popped (which advances the
        new current level), and the current level is simply advanced.
        Anything that is not an integer level is ignored.

        Raises:
            NumberingError: In strict mode, when *level_number* is not an
                integer or is below 1.
        """
        level = coerce_level(level_number)
        if level is None:
            if self.config.strict:
                raise NumberingError("to", level_number, "level must be an integer")
            logger.debug("Ignoring non-integer level %r", level_number)
            return self.get()
        if self.config.strict and level < 1:
            raise NumberingError("to", level_number, "level must be at least 1")

        depth = self.get_level()
        if level > depth:
            return self.push(level - depth)
        if level < depth:
            return self.pop(depth - level)
        return self._increase()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def get(self, no_ending: bool = False, no_indent: bool = False) -> str:
        """Render the current position.

        Args:
            no_ending: Leave off ``config.ending``.
            no_indent: Leave off ``config.indent``.

        Returns:
            Indent, separator-joined levels and ending.
        """
        return (
            ("" if no_indent else self.config.indent)
            + render_position(self._position, self.config.separator)
            + ("" if no_ending else self.config.ending)
        )

    def get_level(self) -> int:
        """Return the current depth (1 for a top-level item)."""
        return len(self._position)

    @property
    def level(self) -> int:
        """Current depth."""
        return self.get_level()

    @property
    def position(self) -> tuple[int, ...]:
        """Snapshot of the position vector."""
        return tuple(self._position)

    # ------------------------------------------------------------------
    # Anchors
    # ------------------------------------------------------------------

    def set_anchor(self, name: str) -> None:
        """Remember the current number under *name*.

        The bare number is stored, without indent or ending, so it reads
        naturally inside a sentence ("see item 2.1").
        """
        value = self.get(no_ending=True, no_indent=True)
        self._anchors.set(name, value)
        logger.debug("Anchor %r set to %s", name, value)

    def get_anchor(self, name: str) -> str | None:
        """Return the number remembered under *name*, or None."""
        return self._anchors.get(name)

    def anchors(self) -> dict[str, str]:
        """Return all remembered anchors."""
        return self._anchors.as_dict()

    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize the engine state for debugging output."""
        return {
            "position": list(self._position),
            "level": self.get_level(),
            "value": self.get(no_ending=True, no_indent=True),
            "config": self.config.to_dict(),
            "anchors": self.anchors(),
        }

    def __repr__(self) -> str:
        return f"DocNumerator({self.get(no_ending=True, no_indent=True)!r})"

    def _increase(self) -> str:
        self._position[-1] += 1
        return self.get()

    def _check_count(self, operation: str, count: int) -> None:
        if self.config.strict and count < 0:
            raise NumberingError(operation, count, "count must not be negative")

"""
Anchor registry for cross-references.

An anchor is a named snapshot of a rendered number. Snapshots are plain
strings, so later navigation or formatting changes never alter them.
"""

from __future__ import annotations

from collections.abc import Iterator


class AnchorRegistry:
    """Mapping of caller-chosen names to captured numbers."""

    def __init__(self) -> None:
        self._anchors: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        """Store *value* under *name*, replacing any earlier capture."""
        self._anchors[name] = value

    def get(self, name: str) -> str | None:
        """Return the value captured under *name*, or None if never set."""
        return self._anchors.get(name)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of all captured anchors."""
        return dict(self._anchors)

    def __contains__(self, name: object) -> bool:
        return name in self._anchors

    def __len__(self) -> int:
        return len(self._anchors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._anchors)

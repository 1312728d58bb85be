"""
Per-instance configuration for the numbering engine.

Each DocNumerator owns its own NumberingConfig, so documents generated
side by side can use different separators or indents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_SEPARATOR = "."
# Seven non-breaking spaces, used as a first-line indent in HTML output
DEFAULT_INDENT = "&nbsp;" * 7
DEFAULT_ENDING = ".&nbsp;"
DEFAULT_START_FROM = 1


@dataclass
class NumberingConfig:
    """Rendering and seeding options for a DocNumerator.

    Attributes:
        separator: Text placed between level values when rendering.
        indent: Text prefixed to every rendered value.
        ending: Text appended to every rendered value unless suppressed.
        start_from: Value given to every newly created level.
        strict: Raise NumberingError for negative counts and invalid
            level targets instead of falling back.
    """

    separator: str = DEFAULT_SEPARATOR
    indent: str = DEFAULT_INDENT
    ending: str = DEFAULT_ENDING
    start_from: int = DEFAULT_START_FROM
    strict: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "separator": self.separator,
            "indent": self.indent,
            "ending": self.ending,
            "start_from": self.start_from,
            "strict": self.strict,
        }

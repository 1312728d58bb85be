"""
docnum - outline-style numbering for generated documents.

Produces identifiers like "1.2.3." while a document generator walks up
and down nesting levels, and remembers issued numbers under anchor names
for later cross-references.
"""

from docnum.anchors import AnchorRegistry
from docnum.config import NumberingConfig
from docnum.engine import DocNumerator
from docnum.errors import NumberingError

__all__ = [
    "AnchorRegistry",
    "DocNumerator",
    "NumberingConfig",
    "NumberingError",
]

"""Tree building engine for the XML builder DSL.

Key Components:
    XMLTreeBuilder: Runs nested blocks and assembles elements into a tree
    TagHandle: Dynamic tag-call surface passed to every block
    BuildSession: Per-build root, element log and depth counter
    XMLElement: Individual element with attributes and text or children
"""

from .builder import (
    BuildSession,
    TagHandle,
    XMLTreeBuilder,
)
from .element import INDENTATION_SPACING, XMLElement

__all__ = [
    "BuildSession",
    "TagHandle",
    "XMLTreeBuilder",
    "XMLElement",
    "INDENTATION_SPACING",
]

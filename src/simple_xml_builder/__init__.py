"""Simple XML Builder.

An embedded DSL for describing element trees with nested blocks and rendering
them as indented markup text.

Progressive API Disclosure:
- Level 1: Simple functions - build(), build_string()
- Level 2: Configured builder - XMLTreeBuilder with BuilderConfig
- Level 3: Integration adapters - to_etree(), to_lxml()
"""

__version__ = "0.1.0"
__author__ = "Simple XML Builder Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 3: Integration adapters
from .api import build, build_string, to_etree, to_lxml

# Configuration and error classes for advanced usage
from .shared import (
    AmbiguousBlockPolicy,
    BuilderConfig,
    BuilderError,
    EmptyBuildError,
    InvalidArgumentShapeError,
)

# Progressive API disclosure - Level 2: Configured builder
from .tree import TagHandle, XMLElement, XMLTreeBuilder

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple build functions
    "build",
    "build_string",

    # Level 2: Builder class and tree objects
    "XMLTreeBuilder",
    "TagHandle",
    "XMLElement",

    # Level 3: Integration adapters
    "to_etree",
    "to_lxml",

    # Configuration and errors
    "AmbiguousBlockPolicy",
    "BuilderConfig",
    "BuilderError",
    "EmptyBuildError",
    "InvalidArgumentShapeError",
]

"""Public API layer: build entry points and integration adapters."""

from .adapters import (
    ConversionResult,
    ElementTreeAdapter,
    IntegrationAdapter,
    LxmlAdapter,
    get_adapter,
    list_available_adapters,
    to_etree,
    to_lxml,
)
from .core import build, build_string

__all__ = [
    "build",
    "build_string",
    "ConversionResult",
    "ElementTreeAdapter",
    "IntegrationAdapter",
    "LxmlAdapter",
    "get_adapter",
    "list_available_adapters",
    "to_etree",
    "to_lxml",
]

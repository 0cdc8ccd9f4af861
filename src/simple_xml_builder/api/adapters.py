"""Integration adapters for exporting built trees to other XML libraries.

Each adapter converts an XMLElement tree into the element type of a target
library. Conversions never raise: failures are reported through an unsuccessful
ConversionResult so callers can fall back to plain text rendering.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from simple_xml_builder.shared import get_logger
from simple_xml_builder.tree import XMLElement


@dataclass
class AdapterMetadata:
    """Metadata about an integration adapter."""

    name: str
    target_library: str
    description: str
    supported_versions: List[str] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Result of a conversion operation."""

    success: bool
    converted_data: Any
    original_data: Any
    conversion_time_ms: float
    errors: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


class IntegrationAdapter(ABC):
    """Abstract base class for all integration adapters."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize the integration adapter.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self._logger = get_logger(__name__, correlation_id, self.__class__.__name__)

    @property
    @abstractmethod
    def metadata(self) -> AdapterMetadata:
        """Get adapter metadata."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the target library can be imported."""

    @abstractmethod
    def _convert(self, element: XMLElement) -> Any:
        """Convert ``element`` to the target library's element type."""

    def to_target(self, element: XMLElement) -> ConversionResult:
        """Convert a built tree to the target format.

        Args:
            element: Root of the tree to convert

        Returns:
            ConversionResult holding the converted root element
        """
        start_time = time.time()

        if not isinstance(element, XMLElement):
            return self._create_error_result(
                f"Expected XMLElement, got {type(element).__name__}",
                element,
                (time.time() - start_time) * 1000,
            )

        if not self.is_available():
            return self._create_error_result(
                f"{self.metadata.target_library} is not installed",
                element,
                (time.time() - start_time) * 1000,
            )

        try:
            converted = self._convert(element)
        except Exception as e:
            self._logger.exception(
                "Conversion failed", extra={"adapter": self.metadata.name}
            )
            return self._create_error_result(
                f"Failed to convert to {self.metadata.target_library}: {e}",
                element,
                (time.time() - start_time) * 1000,
            )

        processing_time = (time.time() - start_time) * 1000
        self._logger.debug(
            "Conversion completed",
            extra={"adapter": self.metadata.name, "conversion_time_ms": processing_time},
        )
        return ConversionResult(
            success=True,
            converted_data=converted,
            original_data=element,
            conversion_time_ms=processing_time,
            metadata={"element_count": sum(1 for _ in element.iter())},
        )

    def _create_error_result(
        self, message: str, original_data: Any, conversion_time_ms: float
    ) -> ConversionResult:
        return ConversionResult(
            success=False,
            converted_data=None,
            original_data=original_data,
            conversion_time_ms=conversion_time_ms,
            errors=[message],
        )


def _attribute_strings(element: XMLElement) -> Dict[str, str]:
    return {str(key): str(value) for key, value in (element.attributes or {}).items()}


class ElementTreeAdapter(IntegrationAdapter):
    """Adapter for the standard library's xml.etree.ElementTree."""

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="elementtree",
            target_library="xml.etree.ElementTree",
            description="Convert XMLElement trees to xml.etree.ElementTree elements",
        )

    def is_available(self) -> bool:
        return True

    def _convert(self, element: XMLElement) -> Any:
        import xml.etree.ElementTree as ET

        return self._convert_element(element, ET)

    def _convert_element(self, element: XMLElement, ET: Any) -> Any:
        target = ET.Element(element.tag, _attribute_strings(element))
        if element.text is not None:
            target.text = str(element.text)
        for child in element.children:
            target.append(self._convert_element(child, ET))
        return target


class LxmlAdapter(ElementTreeAdapter):
    """Adapter for lxml.etree."""

    @property
    def metadata(self) -> AdapterMetadata:
        return AdapterMetadata(
            name="lxml",
            target_library="lxml",
            description="Convert XMLElement trees to lxml.etree elements",
            supported_versions=["4.0+"],
        )

    def is_available(self) -> bool:
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def _convert(self, element: XMLElement) -> Any:
        import lxml.etree as ET

        return self._convert_element(element, ET)


_ADAPTERS = {
    "elementtree": ElementTreeAdapter,
    "lxml": LxmlAdapter,
}


def get_adapter(
    name: str, correlation_id: Optional[str] = None
) -> Optional[IntegrationAdapter]:
    """Get a new adapter instance by name, or None if unknown."""
    adapter_class = _ADAPTERS.get(name.lower())
    if adapter_class is None:
        return None
    return adapter_class(correlation_id)


def list_available_adapters() -> List[str]:
    """Names of adapters whose target library is importable."""
    return [name for name, adapter_class in _ADAPTERS.items()
            if adapter_class().is_available()]


def to_etree(element: XMLElement) -> Any:
    """Convert ``element`` to an xml.etree.ElementTree element.

    Raises:
        ValueError: If the conversion failed
    """
    result = ElementTreeAdapter().to_target(element)
    if not result.success:
        raise ValueError("; ".join(result.errors))
    return result.converted_data


def to_lxml(element: XMLElement) -> Any:
    """Convert ``element`` to an lxml.etree element.

    Raises:
        ValueError: If lxml is missing or the conversion failed
    """
    result = LxmlAdapter().to_target(element)
    if not result.success:
        raise ValueError("; ".join(result.errors))
    return result.converted_data

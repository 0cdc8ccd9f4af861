"""Module-level entry points for building and rendering trees.

These functions create a throwaway XMLTreeBuilder per call, so they are safe to
use from independent threads.
"""

from typing import Optional

from simple_xml_builder.shared import BuilderConfig
from simple_xml_builder.tree import XMLElement, XMLTreeBuilder
from simple_xml_builder.tree.builder import Block


def build(
    block: Block,
    config: Optional[BuilderConfig] = None,
    correlation_id: Optional[str] = None,
) -> XMLElement:
    """Build a tree from ``block`` and return its root element.

    Args:
        block: Callable receiving the tag handle
        config: Optional builder configuration
        correlation_id: Optional correlation ID for build tracking

    Returns:
        Root XMLElement of the built tree

    Examples:
        >>> root = build(lambda xml: xml.br())
        >>> root.render()
        '<br />'
    """
    return XMLTreeBuilder(config=config, correlation_id=correlation_id).build(block)


def build_string(
    block: Block,
    config: Optional[BuilderConfig] = None,
    correlation_id: Optional[str] = None,
) -> str:
    """Build a tree from ``block`` and return its rendered text.

    Examples:
        >>> print(build_string(lambda xml: xml.expenses(594)))
        <expenses>
          594
        </expenses>
    """
    builder = XMLTreeBuilder(config=config, correlation_id=correlation_id)
    builder.build(block)
    return builder.render()

"""Element model and text rendering for built XML trees.

An element holds a tag, an optional attribute mapping and exactly one kind of
content: nothing (self-closing), a scalar value, or a tuple of child elements.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

# Spaces emitted per nesting level
INDENTATION_SPACING = 2


class XMLElement:
    """A single node of a built tree.

    Attributes and scalar content are fixed when the element is created. Child
    content (or a scalar returned from a block) may be attached later, exactly
    once, by the builder that owns the element's block; after that the element
    is sealed and read-only.
    """

    __slots__ = ("_tag", "_attributes", "_text", "_children", "_sealed")

    def __init__(
        self,
        tag: str,
        attributes: Optional[Mapping] = None,
        content: Any = None,
    ) -> None:
        if not isinstance(tag, str) or not tag:
            raise ValueError("Element tag cannot be empty")
        if attributes is not None and not isinstance(attributes, Mapping):
            raise TypeError("Attributes must be a mapping")

        self._tag = tag
        self._attributes: Optional[Dict[str, Any]] = (
            dict(attributes) if attributes is not None else None
        )
        self._text: Any = None
        self._children: Optional[Tuple["XMLElement", ...]] = None
        self._sealed = False

        if _is_element_sequence(content):
            self._attach_children(content)
        elif content is not None:
            self._attach_text(content)

    # Construction-time API used by the builder

    def _seal(self) -> None:
        if self._sealed:
            raise RuntimeError(f"Content of <{self._tag}> is already set")
        self._sealed = True

    def _attach_children(self, children: Iterable["XMLElement"]) -> None:
        """Assign the child sequence; every entry must be an XMLElement."""
        children = tuple(children)
        for child in children:
            if not isinstance(child, XMLElement):
                raise TypeError("Child must be an XMLElement instance")
        self._seal()
        self._children = children

    def _attach_text(self, value: Any) -> None:
        """Assign scalar content."""
        self._seal()
        self._text = value

    # Read-only accessors

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def attributes(self) -> Optional[Dict[str, Any]]:
        """Copy of the attribute mapping, or None when the element has none."""
        if self._attributes is None:
            return None
        return dict(self._attributes)

    @property
    def content(self) -> Any:
        """The child tuple, the scalar value, or None when self-closing."""
        if self._children is not None:
            return self._children
        return self._text

    @property
    def children(self) -> Tuple["XMLElement", ...]:
        """Child elements; empty unless the content is a child sequence."""
        return self._children or ()

    @property
    def text(self) -> Any:
        """Scalar content, or None for self-closing and parent elements."""
        return self._text

    @property
    def is_self_closing(self) -> bool:
        return self._children is None and self._text is None

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Get attribute value with optional default."""
        if self._attributes is None:
            return default
        return self._attributes.get(name, default)

    # Navigation

    def iter(self) -> Iterator["XMLElement"]:
        """Iterate over this element and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find(self, tag: str) -> Optional["XMLElement"]:
        """Find first descendant element with matching tag name."""
        for child in self.children:
            if child.tag == tag:
                return child

        for child in self.children:
            found = child.find(tag)
            if found is not None:
                return found

        return None

    def find_all(self, tag: str) -> List["XMLElement"]:
        """Find all descendant elements with matching tag name."""
        results = []
        for child in self.children:
            if child.tag == tag:
                results.append(child)
            results.extend(child.find_all(tag))
        return results

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {"tag": self._tag}

        if self._attributes:
            result["attributes"] = dict(self._attributes)

        if self._children is not None:
            result["children"] = [child.to_dict() for child in self._children]
        elif self._text is not None:
            result["text"] = self._text

        return result

    # Rendering

    def render(self, depth: int = 0, indent_width: int = INDENTATION_SPACING) -> str:
        """Render the element and its content as indented text.

        Args:
            depth: Nesting level of this element; each level adds
                ``indent_width`` spaces in front of every emitted line
            indent_width: Spaces per nesting level

        Returns:
            Newline-joined text without a trailing newline
        """
        indentation = " " * indent_width * depth

        if self.is_self_closing:
            return indentation + self._opening_tag(self_closing=True)

        if self._children is not None:
            body = [child.render(depth + 1, indent_width) for child in self._children]
        else:
            body = [" " * indent_width * (depth + 1) + str(self._text)]

        return "\n".join(
            [indentation + self._opening_tag()]
            + body
            + [indentation + self._closing_tag()]
        )

    def _opening_tag(self, self_closing: bool = False) -> str:
        attrs = ""
        if self._attributes:
            attrs = " " + " ".join(
                f'{key}="{value}"' for key, value in self._attributes.items()
            )
        return f"<{self._tag}{attrs}{' /' if self_closing else ''}>"

    def _closing_tag(self) -> str:
        return f"</{self._tag}>"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._children is not None:
            kind = f"children={len(self._children)}"
        elif self._text is not None:
            kind = f"text={self._text!r}"
        else:
            kind = "self-closing"
        return f"XMLElement(tag={self._tag!r}, {kind})"


def _is_element_sequence(content: Any) -> bool:
    """Decide whether constructor content is a child sequence.

    A list or tuple that is empty or holds any XMLElement is a child sequence
    (and must then hold only elements); any other value is scalar content.
    """
    if not isinstance(content, (list, tuple)):
        return False
    return not content or any(isinstance(item, XMLElement) for item in content)

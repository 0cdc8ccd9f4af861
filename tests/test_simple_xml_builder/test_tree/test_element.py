"""Tests for the XMLElement model and its text rendering."""

import pytest

from simple_xml_builder.tree import INDENTATION_SPACING, XMLElement


class TestXMLElementConstruction:
    """Test element creation and validation."""

    def test_element_creation_with_valid_data(self) -> None:
        """Test creating XMLElement with attributes and scalar content."""
        element = XMLElement("price", {"currency": "USD"}, 19.99)

        assert element.tag == "price"
        assert element.attributes == {"currency": "USD"}
        assert element.text == 19.99
        assert element.content == 19.99
        assert element.children == ()
        assert not element.is_self_closing
        assert not element.has_children

    def test_element_without_content_is_self_closing(self) -> None:
        """Test that an element with no content is self-closing."""
        element = XMLElement("br")

        assert element.is_self_closing
        assert element.attributes is None
        assert element.content is None
        assert element.text is None

    def test_element_creation_with_empty_tag_raises_error(self) -> None:
        """Test that empty tag raises ValueError."""
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            XMLElement("")

    def test_element_creation_with_non_mapping_attributes_raises_error(self) -> None:
        """Test that attributes must be a mapping."""
        with pytest.raises(TypeError, match="Attributes must be a mapping"):
            XMLElement("div", ["class", "main"])  # type: ignore[arg-type]

    def test_element_list_content_becomes_children(self) -> None:
        """Test that a list of elements is stored as a child tuple."""
        first = XMLElement("a")
        second = XMLElement("b")

        parent = XMLElement("parent", content=[first, second])

        assert parent.children == (first, second)
        assert parent.content == (first, second)
        assert parent.has_children
        assert parent.text is None

    def test_mixed_child_sequence_raises_error(self) -> None:
        """Test that a scalar mixed into a child sequence is rejected."""
        with pytest.raises(TypeError, match="Child must be an XMLElement instance"):
            XMLElement("parent", content=[XMLElement("a"), "text"])

    def test_sequence_without_elements_is_scalar_content(self) -> None:
        """Test that a tuple of plain values is treated as scalar content."""
        element = XMLElement("point", content=(1, 2))

        assert element.text == (1, 2)
        assert element.children == ()

    def test_attributes_are_copied(self) -> None:
        """Test that later changes to the source mapping do not leak in."""
        source = {"id": "x"}
        element = XMLElement("div", source)
        source["id"] = "changed"

        element.attributes["id"] = "also changed"

        assert element.get_attribute("id") == "x"

    def test_content_can_only_be_attached_once(self) -> None:
        """Test that a sealed element rejects further content."""
        element = XMLElement("title", content="Report")

        with pytest.raises(RuntimeError, match="already set"):
            element._attach_text("Other")

    def test_get_attribute_default(self) -> None:
        """Test get_attribute falls back to the default."""
        element = XMLElement("img", {"src": "/favicon.ico"})

        assert element.get_attribute("src") == "/favicon.ico"
        assert element.get_attribute("alt") is None
        assert element.get_attribute("alt", "none") == "none"
        assert XMLElement("br").get_attribute("id", "n/a") == "n/a"


class TestXMLElementRender:
    """Test indented text rendering."""

    def test_self_closing_render(self) -> None:
        """Test that a bare element renders as a single self-closing tag."""
        assert XMLElement("br").render() == "<br />"

    def test_self_closing_render_with_attributes(self) -> None:
        """Test self-closing tag with attributes."""
        element = XMLElement("clearance", {"level": "classified"})

        assert element.render() == '<clearance level="classified" />'

    def test_scalar_render_is_three_lines(self) -> None:
        """Test scalar content renders opening, indented text, closing."""
        element = XMLElement("expenses", content=594)

        assert element.render().split("\n") == ["<expenses>", "  594", "</expenses>"]

    def test_attribute_order_is_preserved(self) -> None:
        """Test attributes render in declaration order."""
        element = XMLElement("document", {"type": "xml", "use": "example"}, [])

        assert element.render().split("\n")[0] == '<document type="xml" use="example">'

    def test_attribute_values_are_stringified(self) -> None:
        """Test non-string attribute values use their str() form."""
        element = XMLElement("amounts", {"month": 1, "final": True})

        assert element.render() == '<amounts month="1" final="True" />'

    def test_empty_attribute_mapping_renders_like_none(self) -> None:
        """Test an empty mapping adds no stray whitespace."""
        assert XMLElement("br", {}).render() == "<br />"

    def test_nested_render_indents_two_spaces_per_level(self) -> None:
        """Test children are indented relative to their parent."""
        leaf = XMLElement("leaf", content="deep")
        middle = XMLElement("middle", content=[leaf])
        root = XMLElement("root", content=[middle])

        assert root.render() == "\n".join([
            "<root>",
            "  <middle>",
            "    <leaf>",
            "      deep",
            "    </leaf>",
            "  </middle>",
            "</root>",
        ])

    def test_render_at_depth(self) -> None:
        """Test render honours a starting depth."""
        element = XMLElement("revenue", content=9)

        assert element.render(depth=2) == "    <revenue>\n      9\n    </revenue>"

    def test_render_custom_indent_width(self) -> None:
        """Test a custom indent width."""
        root = XMLElement("root", content=[XMLElement("child")])

        assert root.render(indent_width=4) == "<root>\n    <child />\n</root>"

    def test_empty_child_sequence_renders_open_and_close(self) -> None:
        """Test an element with an empty child sequence is not self-closing."""
        assert XMLElement("ul", content=[]).render() == "<ul>\n</ul>"

    def test_render_has_no_trailing_newline(self) -> None:
        """Test output does not end with a newline."""
        rendered = XMLElement("name", content="X").render()

        assert not rendered.endswith("\n")
        assert all(line == line.rstrip() for line in rendered.split("\n"))

    def test_str_matches_render(self) -> None:
        """Test str() renders at depth zero."""
        element = XMLElement("name", content="Annual Report")

        assert str(element) == element.render()

    def test_render_is_idempotent(self) -> None:
        """Test repeated rendering yields identical text."""
        root = XMLElement("root", {"a": 1}, [XMLElement("x", content=1), XMLElement("y")])

        assert root.render() == root.render()

    def test_default_indentation_spacing(self) -> None:
        """Test the default indentation constant."""
        assert INDENTATION_SPACING == 2


class TestXMLElementNavigation:
    """Test read-only navigation helpers."""

    def _tree(self) -> XMLElement:
        expenses = XMLElement("expenses", content=5)
        revenue = XMLElement("revenue", content=9)
        amounts = XMLElement("amounts", {"month": 1}, [expenses, revenue])
        name = XMLElement("name", content="X")
        return XMLElement("report", content=[name, amounts])

    def test_iter_is_document_order(self) -> None:
        """Test iteration visits self first, then descendants depth-first."""
        tags = [element.tag for element in self._tree().iter()]

        assert tags == ["report", "name", "amounts", "expenses", "revenue"]

    def test_find_descendant(self) -> None:
        """Test find returns the first matching descendant."""
        found = self._tree().find("revenue")

        assert found is not None
        assert found.text == 9

    def test_find_returns_none_when_missing(self) -> None:
        """Test find returns None when tag not found."""
        assert self._tree().find("missing") is None

    def test_find_all(self) -> None:
        """Test find_all returns every matching descendant."""
        root = XMLElement("div", content=[
            XMLElement("div", content=[XMLElement("span")]),
            XMLElement("span"),
        ])

        assert len(root.find_all("span")) == 2
        assert len(root.find_all("div")) == 1

    def test_to_dict(self) -> None:
        """Test dictionary conversion."""
        assert self._tree().to_dict() == {
            "tag": "report",
            "children": [
                {"tag": "name", "text": "X"},
                {
                    "tag": "amounts",
                    "attributes": {"month": 1},
                    "children": [
                        {"tag": "expenses", "text": 5},
                        {"tag": "revenue", "text": 9},
                    ],
                },
            ],
        }

    def test_repr(self) -> None:
        """Test repr summarizes the content kind."""
        assert repr(XMLElement("br")) == "XMLElement(tag='br', self-closing)"
        assert repr(XMLElement("a", content="x")) == "XMLElement(tag='a', text='x')"
        assert repr(self._tree()) == "XMLElement(tag='report', children=2)"

"""Test module for simple_xml_builder package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import simple_xml_builder

    # Assert
    assert simple_xml_builder is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import simple_xml_builder

    # Assert
    assert isinstance(simple_xml_builder.__version__, str)
    assert simple_xml_builder.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import simple_xml_builder

    # Assert
    assert simple_xml_builder.__author__ == "Simple XML Builder Team"


def test_package_all_exports() -> None:
    """Test that __all__ names resolve on the package."""
    # Arrange & Act
    import simple_xml_builder

    # Assert
    for name in simple_xml_builder.__all__:
        assert hasattr(simple_xml_builder, name), name
    assert "build" in simple_xml_builder.__all__
    assert "XMLTreeBuilder" in simple_xml_builder.__all__

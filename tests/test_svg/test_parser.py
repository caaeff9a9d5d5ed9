"""Tests for the lxml markup adapter."""

import pytest

from tests.conftest import CLOSE_SVG, COMMENTED_SVG, TWOTONE_SVG, UNDECLARED_XLINK_SVG

from icontree.errors import SvgParseError, SvgValidationError
from icontree.svg.parser import parse_svg_file, parse_svg_markup
from icontree.svg.tree import generate_abstract_tree


def test_parse_close():
    root = parse_svg_markup(CLOSE_SVG)
    assert root.tag_name == "svg"
    assert root.get_attr("viewBox").value == "64 64 896 896"
    assert [c.tag_name for c in root.child_nodes] == ["path"]


def test_default_namespace_kept_as_attribute():
    root = parse_svg_markup(CLOSE_SVG)
    assert root.get_attr("xmlns").value == "http://www.w3.org/2000/svg"
    # Declared once on the root, not repeated on children
    assert root.child_nodes[0].get_attr("xmlns") is None


def test_comments_and_declaration_dropped():
    root = parse_svg_markup(COMMENTED_SVG)
    assert [c.tag_name for c in root.child_nodes] == ["use", "circle"]


def test_prefixed_attribute_names():
    root = parse_svg_markup(COMMENTED_SVG)
    assert root.get_attr("xmlns:xlink").value == "http://www.w3.org/1999/xlink"
    use = root.child_nodes[0]
    assert use.get_attr("xlink:href").value == "#dot"


def test_nested_groups():
    root = parse_svg_markup(TWOTONE_SVG)
    group = root.child_nodes[2]
    assert group.tag_name == "g"
    assert len(group.child_nodes) == 2
    assert group.get_attr("fill").value == "#333"


def test_malformed_markup():
    with pytest.raises(SvgParseError) as exc:
        parse_svg_markup("<svg viewBox='0 0 24 24'><path></svg>", debug_label="fill/bad")
    assert isinstance(exc.value, SvgValidationError)
    assert exc.value.debug_label == "fill/bad"
    assert "fill/bad" in str(exc.value)


def test_parse_file_uses_stem_as_label(tmp_path):
    path = tmp_path / "close.svg"
    path.write_text("<svg><path", encoding="utf-8")
    with pytest.raises(SvgParseError) as exc:
        parse_svg_file(path)
    assert exc.value.debug_label == "close"


LATIN1_SVG = '''<?xml version="1.0" encoding="ISO-8859-1"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" id="été">
  <path d="M0 0h24v24H0z"/>
</svg>'''


def test_text_input_ignores_declared_encoding():
    root = parse_svg_markup(LATIN1_SVG)
    assert root.get_attr("id").value == "été"


def test_bytes_input_honours_declared_encoding():
    root = parse_svg_markup(LATIN1_SVG.encode("iso-8859-1"))
    assert root.get_attr("id").value == "été"


def test_undeclared_xlink_prefix_tolerated():
    root = parse_svg_markup(UNDECLARED_XLINK_SVG, debug_label="outline/link")
    use = root.child_nodes[0]
    assert use.tag_name == "use"
    assert use.get_attr("xlink:href").value == "#dot"
    assert [c.tag_name for c in root.child_nodes] == ["use", "circle"]

    tree = generate_abstract_tree(root, "outline/link")
    assert tree.children[0].attrs == {"xlink:href": "#dot"}


def test_undeclared_prefix_does_not_hide_other_errors():
    with pytest.raises(SvgParseError):
        parse_svg_markup('<svg viewBox="0 0 24 24"><use xlink:href="#a"></svg>', debug_label="bad")

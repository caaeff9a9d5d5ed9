"""SVG parser — facade over lxml.

Converts raw SVG markup into the SvgNode structure the tree builder reads.
Only elements survive: comments, processing instructions and text are
dropped here so the builder never sees a tagless node from a well-formed
file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from lxml import etree

from icontree.errors import SvgParseError
from icontree.models.abstract_node import SvgAttr, SvgNode

logger = logging.getLogger(__name__)

_XML_NS = "http://www.w3.org/XML/1998/namespace"


def _make_parser(encoding: str | None = None, recover: bool = False) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        recover=recover,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )


def _only_namespace_errors(error: etree.XMLSyntaxError) -> bool:
    errors = [e for e in error.error_log if e.level >= etree.ErrorLevels.ERROR]
    return bool(errors) and all(e.domain == etree.ErrorDomains.NAMESPACE for e in errors)


def parse_svg_markup(svg_text: str | bytes, debug_label: str | None = None) -> SvgNode:
    """Parse raw SVG markup into an SvgNode tree.

    Text input is already decoded, so any encoding in its XML declaration
    is ignored. Undeclared prefixes (``xlink:href`` without ``xmlns:xlink``)
    are tolerated and keep their prefixed name.
    """
    if isinstance(svg_text, str):
        data, encoding = svg_text.encode("utf-8"), "utf-8"
    else:
        data, encoding = svg_text, None
    try:
        root = etree.fromstring(data, _make_parser(encoding))
    except etree.XMLSyntaxError as e:
        if not _only_namespace_errors(e):
            raise SvgParseError(f"Malformed SVG markup: {e}", debug_label) from e
        logger.info("%s: undeclared namespace prefix, parsing leniently", debug_label)
        root = etree.fromstring(data, _make_parser(encoding, recover=True))
    node = _convert(root, parent=None)
    logger.debug("Parsed %s: <%s> with %d children", debug_label, node.tag_name, len(node.child_nodes))
    return node


def parse_svg_file(path: str | os.PathLike[str], debug_label: str | None = None) -> SvgNode:
    path = Path(path)
    return parse_svg_markup(path.read_bytes(), debug_label or path.stem)


def _qualified(name: str, nsmap: dict[str | None, str]) -> str:
    """Turn lxml's ``{uri}local`` into ``prefix:local``; default namespace drops out."""
    if not name.startswith("{"):
        return name
    qname = etree.QName(name)
    if nsmap.get(None) == qname.namespace:
        return qname.localname
    if qname.namespace == _XML_NS:
        return f"xml:{qname.localname}"
    for prefix, uri in nsmap.items():
        if uri == qname.namespace and prefix is not None:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _declared_namespaces(element: etree._Element, parent: etree._Element | None) -> list[SvgAttr]:
    inherited = parent.nsmap if parent is not None else {}
    attrs: list[SvgAttr] = []
    for prefix, uri in element.nsmap.items():
        if inherited.get(prefix) == uri:
            continue
        attrs.append(SvgAttr(name="xmlns" if prefix is None else f"xmlns:{prefix}", value=uri))
    return attrs


def _convert(element: etree._Element, parent: etree._Element | None) -> SvgNode:
    nsmap = element.nsmap
    attrs = _declared_namespaces(element, parent)
    for name, value in element.attrib.items():
        attrs.append(SvgAttr(name=_qualified(name, nsmap), value=value))

    children = [
        _convert(child, parent=element)
        for child in element
        if isinstance(child.tag, str)
    ]
    return SvgNode(tag_name=_qualified(element.tag, nsmap), attrs=attrs, child_nodes=children)

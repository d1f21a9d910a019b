"""SVG document model, parsing and JSX-ready serialization."""

from dataclasses import dataclass
from typing import Union
from xml.etree import ElementTree as ET

from .errors import SvgParseError
from .utils import get_local_name, get_markup_name

ROOT_TAG = "svg"

Node = Union["SvgElement", str]


@dataclass(frozen=True)
class SvgElement:
    """Immutable SVG element.

    Attributes are kept as ordered (name, value) pairs so that serialization
    reproduces the source order. Children are elements or text runs.
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()


def _from_etree(
    element: ET.Element, prefixes: dict[str, str], tag: str | None = None
) -> SvgElement:
    """Build an SvgElement from an ElementTree element (tail excluded)."""
    children: list[Node] = []
    if element.text:
        children.append(element.text)
    for child in element:
        # Comments and processing instructions have non-string tags
        if isinstance(child.tag, str):
            children.append(_from_etree(child, prefixes))
        if child.tail:
            children.append(child.tail)

    attributes = tuple(
        (get_markup_name(name, prefixes), value)
        for name, value in element.attrib.items()
    )
    return SvgElement(
        tag=tag or get_markup_name(element.tag, prefixes),
        attributes=attributes,
        children=tuple(children),
    )


def _find_svg_root(root: ET.Element) -> ET.Element | None:
    for elem in root.iter():
        if isinstance(elem.tag, str) and get_local_name(elem.tag).lower() == ROOT_TAG:
            return elem
    return None


def _parse_xml(text: str) -> tuple[ET.Element, dict[str, str]]:
    """Parse XML text, collecting the prefix declared for each namespace URI.

    When one URI is declared with several prefixes the first one wins.

    Raises:
        ET.ParseError: If the text is not well-formed XML.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    parser.feed(text)
    parser.close()

    document = None
    prefixes: dict[str, str] = {}
    for event, item in parser.read_events():
        if event == "start-ns":
            prefix, uri = item
            if prefix:
                prefixes.setdefault(uri, prefix)
        elif document is None:
            document = item
    return document, prefixes


def parse_svg_text(text: str) -> SvgElement:
    """Parse SVG markup into an SvgElement tree rooted at the svg element.

    When the document root is not ``svg`` (for example an XHTML wrapper),
    the first ``svg`` element in document order becomes the root. The root
    tag is always normalized to lowercase ``svg``. Namespaced names keep the
    prefix declared in the source (``sketch:type``).

    Args:
        text: Decoded SVG markup.

    Returns:
        Root svg element.

    Raises:
        SvgParseError: If the text is blank, is not well-formed XML, has no
            svg element or is nested too deeply to convert.
    """
    stripped = text.lstrip("\ufeff").strip()
    if not stripped:
        raise SvgParseError("Empty SVG content provided")

    try:
        document, prefixes = _parse_xml(stripped)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG markup: {e}") from e

    svg = _find_svg_root(document)
    if svg is None:
        root_name = get_local_name(document.tag)
        raise SvgParseError(f"No <svg> element found (document root is <{root_name}>)")

    try:
        return _from_etree(svg, prefixes, tag=ROOT_TAG)
    except RecursionError as e:
        raise SvgParseError("SVG nesting too deep") from e


def escape_attribute(value: str) -> str:
    """Escape an attribute value for a double-quoted JSX string."""
    return value.replace("&", "&amp;").replace("<", "&lt;").replace('"', "&quot;")


def escape_text(text: str) -> str:
    """Escape a text run so JSX reads it literally."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("{", "&#123;")
        .replace("}", "&#125;")
    )


def _write(element: SvgElement, parts: list[str]) -> None:
    parts.append(f"<{element.tag}")
    for name, value in element.attributes:
        parts.append(f' {name}="{escape_attribute(value)}"')

    if not element.children:
        parts.append("/>")
        return

    parts.append(">")
    for child in element.children:
        if isinstance(child, SvgElement):
            _write(child, parts)
        else:
            parts.append(escape_text(child))
    parts.append(f"</{element.tag}>")


def serialize_svg(element: SvgElement) -> str:
    """Serialize an element tree to markup.

    Elements without children are written self-closing.

    Args:
        element: Root of the tree to serialize.

    Returns:
        Markup string.
    """
    parts: list[str] = []
    _write(element, parts)
    return "".join(parts)

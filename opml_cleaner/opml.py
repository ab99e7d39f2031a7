"""
OPML document model.

Handles OPML parsing, building and serialization for subscription lists.
"""

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import OPMLParseError, OPMLSerializeError

OPML_VERSION = "2.0"
DEFAULT_TITLE = "feeds"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# (model field, XML attribute) in serialization order
_OUTLINE_ATTRIBUTES = (
    ("text", "text"),
    ("title", "title"),
    ("description", "description"),
    ("type", "type"),
    ("version", "version"),
    ("html_url", "htmlUrl"),
    ("xml_url", "xmlUrl"),
)

# Characters that cannot appear in an XML 1.0 document
_INVALID_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class Outline(BaseModel):
    """One subscription entry in an OPML body."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    title: str = ""
    description: str = ""
    type: str = ""
    version: str = ""
    html_url: str = ""
    xml_url: str = ""


class OPMLHead(BaseModel):
    """OPML head metadata."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    date_created: str = ""


class OPMLDocument(BaseModel):
    """OPML root container: version, head and body outlines."""

    model_config = ConfigDict(frozen=True)

    version: str = ""
    head: OPMLHead = Field(default_factory=OPMLHead)
    outlines: list[Outline] = Field(default_factory=list)


def _child_text(parent: ET.Element | None, tag: str) -> str:
    if parent is None:
        return ""
    child = parent.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def parse_opml(content: bytes | str) -> OPMLDocument:
    """
    Parse an OPML document.

    Absent elements and attributes are read as empty values. Only direct
    outline children of the body are returned; nested outlines are ignored.

    Args:
        content: OPML XML content.

    Returns:
        Parsed OPML document.

    Raises:
        OPMLParseError: If the content is not well-formed XML or the root
            element is not <opml>.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise OPMLParseError(f"Invalid OPML format: {e}") from e

    if root.tag != "opml":
        raise OPMLParseError(f"Invalid OPML format: unexpected root element <{root.tag}>")

    head = root.find("head")
    outlines = []
    body = root.find("body")
    if body is not None:
        for element in body.findall("outline"):
            outlines.append(
                Outline(**{field: element.get(attr, "") for field, attr in _OUTLINE_ATTRIBUTES})
            )

    return OPMLDocument(
        version=root.get("version", ""),
        head=OPMLHead(
            title=_child_text(head, "title"),
            date_created=_child_text(head, "dateCreated"),
        ),
        outlines=outlines,
    )


def build_opml(outlines: Iterable[Outline], title: str = DEFAULT_TITLE) -> OPMLDocument:
    """
    Build a new OPML 2.0 document from outlines.

    Args:
        outlines: Outline entries, kept in the given order.
        title: OPML document title.

    Returns:
        New OPML document stamped with the current time.
    """
    return OPMLDocument(
        version=OPML_VERSION,
        head=OPMLHead(
            title=title,
            date_created=datetime.now(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT"),
        ),
        outlines=list(outlines),
    )


def _check_text(value: str) -> str:
    match = _INVALID_XML_CHARS.search(value)
    if match:
        raise OPMLSerializeError(f"Invalid character {match.group()!r} in {value!r}")
    return value


def serialize_opml(document: OPMLDocument) -> bytes:
    """
    Serialize an OPML document to indented XML.

    Args:
        document: OPML document.

    Returns:
        UTF-8 encoded XML, including the XML declaration.

    Raises:
        OPMLSerializeError: If a value cannot be represented in XML.
    """
    opml = ET.Element("opml", version=_check_text(document.version))

    head = ET.SubElement(opml, "head")
    ET.SubElement(head, "title").text = _check_text(document.head.title)
    ET.SubElement(head, "dateCreated").text = _check_text(document.head.date_created)

    body = ET.SubElement(opml, "body")
    for outline in document.outlines:
        element = ET.SubElement(body, "outline")
        for field, attr in _OUTLINE_ATTRIBUTES:
            element.set(attr, _check_text(getattr(outline, field)))

    tree = ET.ElementTree(opml)
    ET.indent(tree, space="  ")

    try:
        output = ET.tostring(opml, encoding="unicode")
        return (XML_HEADER + output + "\n").encode("utf-8")
    except (TypeError, ValueError) as e:
        raise OPMLSerializeError(f"Failed to serialize OPML: {e}") from e

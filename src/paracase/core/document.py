"""Document model: a small HTML node tree built with lxml's permissive parser."""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from lxml import etree, html as lxml_html

from .errors import ParseError

logger = logging.getLogger(__name__)

# Inputs starting like this are parsed as full documents, everything else is a fragment
FULL_DOCUMENT_RE = re.compile(r'^\s*(?:<!--.*?-->\s*)*<(?:!doctype|html)\b', re.IGNORECASE | re.DOTALL)


@dataclass
class Text:
    """Character data, stored unescaped."""

    content: str


@dataclass
class Comment:
    """An HTML comment, kept so it survives the round trip."""

    content: str


@dataclass
class Element:
    """An element with its tag name, attributes and ordered children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)

    def matches(self, tag_name: str) -> bool:
        return self.tag.lower() == tag_name.lower()


Node = Union[Element, Text, Comment]


class Document:
    """
    Root of a parsed HTML tree.

    The document owns exactly one ``html`` element. Fragments are exposed as the
    children of its ``body`` element.
    """

    def __init__(self, root: Element):
        self.root = root

    @property
    def head(self) -> Optional[Element]:
        return self.find_first('head')

    @property
    def body(self) -> Optional[Element]:
        return self.find_first('body')

    def find_first(self, tag_name: str) -> Optional[Element]:
        """Return the first element in document order with the given tag, or None."""
        for element in iter_elements(self.root):
            if element.matches(tag_name):
                return element
        return None

    def __repr__(self):
        return f"Document(root={self.root.tag!r}, children={len(self.root.children)})"


def iter_elements(node: Node) -> Iterator[Element]:
    """Yield every element under (and including) ``node`` in pre-order."""
    if not isinstance(node, Element):
        return
    yield node
    for child in node.children:
        yield from iter_elements(child)


def select(root: Union[Document, Element], tag_name: str) -> list[Element]:
    """
    Find every element whose tag matches ``tag_name``.

    Matching is case-insensitive and ignores nesting depth and ancestor types.

    Args:
        root: Document or element to search
        tag_name: Tag name to look for, e.g. ``"p"``

    Returns:
        Matching elements in document order (empty if there are none)
    """
    start = root.root if isinstance(root, Document) else root
    return [element for element in iter_elements(start) if element.matches(tag_name)]


def _to_bytes(markup: Union[str, bytes]) -> bytes:
    """Encode the input as UTF-8, refusing byte sequences that are not valid text."""
    try:
        if isinstance(markup, bytes):
            markup.decode('utf-8')
            return markup
        return markup.encode('utf-8')
    except UnicodeError as e:
        raise ParseError(f"Input is not a valid UTF-8 character sequence: {e}") from e


def _convert(source) -> Element:
    """Copy an lxml element and its subtree into our own node types."""
    element = Element(source.tag, dict(source.attrib))
    if source.text:
        element.children.append(Text(source.text))

    for child in source:
        if child.tag is etree.Comment:
            element.children.append(Comment(child.text or ''))
        elif isinstance(child.tag, str):
            element.children.append(_convert(child))
        # Processing instructions and entity references are dropped, their tail is kept
        if child.tail:
            element.children.append(Text(child.tail))

    return element


def parse(markup: Union[str, bytes]) -> Document:
    """
    Parse an HTML fragment or document into a Document.

    Tag soup is repaired by the parser (unclosed tags are closed, stray end tags
    ignored), so only input that cannot be read at all is an error.

    Args:
        markup: HTML text, or UTF-8 encoded bytes

    Returns:
        A new Document whose ``body`` holds the fragment's top-level nodes

    Raises:
        ParseError: If the input cannot be decoded or parsed into a tree
    """
    data = _to_bytes(markup)

    is_full_document = FULL_DOCUMENT_RE.match(data.decode('utf-8')) is not None
    if not is_full_document:
        # Parsing inside <body> keeps leading text from being wrapped in a <p>
        data = b'<html><body>' + data + b'</body></html>'

    parser = lxml_html.HTMLParser(encoding='utf-8')
    try:
        tree = lxml_html.document_fromstring(data, parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"Failed to parse HTML: {e}") from e

    root = _convert(tree)
    if not root.matches('html'):
        root = Element('html', children=[root])

    if not any(isinstance(child, Element) and child.matches('head') for child in root.children):
        root.children.insert(0, Element('head'))

    logger.debug(f"Parsed {'document' if is_full_document else 'fragment'} of {len(data)} bytes")
    return Document(root)

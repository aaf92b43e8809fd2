"""Serialize document nodes back into HTML markup."""

from typing import Iterable

from .document import Comment, Element, Node, Text
from .errors import SerializationError


# Elements that never have children or an end tag
VOID_ELEMENTS = frozenset({
    'area', 'base', 'basefont', 'bgsound', 'br', 'col', 'embed', 'frame',
    'hr', 'img', 'input', 'keygen', 'link', 'meta', 'param', 'source',
    'track', 'wbr',
})

# Elements whose text content is written out verbatim
RAW_TEXT_ELEMENTS = frozenset({
    'script', 'style', 'xmp', 'iframe', 'noembed', 'noframes', 'plaintext',
})


def escape_text(text: str) -> str:
    return text.replace('&', '&amp;').replace('<', '&lt;')


def escape_attribute(value: str) -> str:
    return value.replace('&', '&amp;').replace('"', '&quot;')


def _serialize(node: Node, parent_tag: str, out: list[str]) -> None:
    if isinstance(node, Text):
        if parent_tag in RAW_TEXT_ELEMENTS:
            out.append(node.content)
        else:
            out.append(escape_text(node.content))
    elif isinstance(node, Element):
        tag = node.tag.lower()
        out.append(f'<{tag}')
        for name, value in node.attributes.items():
            out.append(f' {name}="{escape_attribute(value)}"')
        out.append('>')
        if tag in VOID_ELEMENTS:
            return
        for child in node.children:
            _serialize(child, tag, out)
        out.append(f'</{tag}>')
    elif isinstance(node, Comment):
        out.append(f'<!--{node.content}-->')
    else:
        raise SerializationError(f"Cannot serialize object of type {type(node).__name__}")


def serialize(node: Node) -> str:
    """
    Serialize a single node and its subtree.

    Args:
        node: An Element, Text or Comment node

    Returns:
        HTML markup for the node

    Raises:
        SerializationError: If the tree contains something that is not a node
    """
    out: list[str] = []
    _serialize(node, '', out)
    return ''.join(out)


def serialize_children(nodes: Iterable[Node]) -> str:
    """Serialize a sequence of sibling nodes and concatenate the results in order."""
    out: list[str] = []
    for node in nodes:
        _serialize(node, '', out)
    return ''.join(out)

"""Rewrite the case of paragraph text inside an HTML fragment."""

import logging
from enum import Enum
from typing import Union

from .document import Document, Element, Text, parse, select
from .errors import BodyNotFoundError, EmptyInputError
from .serializer import serialize_children

logger = logging.getLogger(__name__)

TARGET_TAG = 'p'


class CaseDirective(Enum):
    """Case conversion applied to paragraph text."""

    UPPERCASE = 'uppercase'
    LOWERCASE = 'lowercase'

    @classmethod
    def from_value(cls, value: Union["CaseDirective", str]) -> "CaseDirective":
        """
        Look up a directive by its wire value.

        Raises:
            ValueError: If the value is not a known directive
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ', '.join(member.value for member in cls)
            raise ValueError(f"Unknown transform {value!r}, expected one of: {choices}") from None

    def apply(self, text: str) -> str:
        if self is CaseDirective.UPPERCASE:
            return text.upper()
        return text.lower()


def rewrite_text_subtree(node: Element, directive: CaseDirective) -> None:
    """
    Rewrite every text node below ``node`` in place.

    Descendant elements are always recursed into; their tags and attributes are
    left as they are. Comments are not text and stay untouched.
    """
    for child in node.children:
        if isinstance(child, Text):
            child.content = directive.apply(child.content)
        elif isinstance(child, Element):
            rewrite_text_subtree(child, directive)


def apply_case(document: Document, directive: CaseDirective) -> None:
    """Apply ``directive`` to the text of every paragraph in the document."""
    targets = select(document, TARGET_TAG)
    logger.debug(f"Rewriting {len(targets)} <{TARGET_TAG}> element(s) to {directive.value}")
    for target in targets:
        rewrite_text_subtree(target, directive)


def transform(markup: str, directive: Union[CaseDirective, str]) -> str:
    """
    Change the case of all paragraph text in an HTML fragment.

    Args:
        markup: The HTML fragment to transform
        directive: A CaseDirective or its wire value ("uppercase" / "lowercase")

    Returns:
        The serialized children of the document body after the rewrite

    Raises:
        EmptyInputError: If the markup is empty or whitespace only
        ParseError: If the markup cannot be parsed
        BodyNotFoundError: If the parsed document has no body
        ValueError: If the directive is unknown
    """
    directive = CaseDirective.from_value(directive)

    if not markup or not markup.strip():
        raise EmptyInputError()

    document = parse(markup)

    body = document.body
    if body is None:
        raise BodyNotFoundError()

    apply_case(document, directive)
    return serialize_children(body.children)

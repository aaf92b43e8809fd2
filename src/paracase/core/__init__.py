"""Core processing modules for paracase."""

from .document import Document, Element, Text, Comment, parse, select
from .serializer import serialize, serialize_children
from .transform import CaseDirective, apply_case, transform

__all__ = [
    "Document", "Element", "Text", "Comment", "parse", "select",
    "serialize", "serialize_children",
    "CaseDirective", "apply_case", "transform",
]

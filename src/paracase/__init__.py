"""Paracase - change the case of paragraph text in HTML fragments."""

from .core.transform import CaseDirective, transform

__version__ = "0.1.0"

__all__ = ["CaseDirective", "transform", "__version__"]

"""Exceptions raised while transforming HTML fragments."""


class TransformError(Exception):
    """Base class for every failure of a transformation request."""


class EmptyInputError(TransformError):
    """The HTML input was empty or whitespace only."""

    def __init__(self, message: str = "HTML input is empty"):
        super().__init__(message)


class ParseError(TransformError):
    """The input could not be turned into a node tree."""


class BodyNotFoundError(TransformError):
    """The parsed document has no <body> element."""

    def __init__(self, message: str = "Document has no <body> element"):
        super().__init__(message)


class SerializationError(TransformError):
    """A node tree could not be serialized back to markup."""

"""Errors raised when a document breaks the documentation markdown convention."""


class MarkdownConventionError(Exception):
    """Base exception for fatal extraction failures."""

    pass


class StructuralMismatchError(MarkdownConventionError):
    """Raised when open/close tokens do not pair up the way extraction expects."""

    pass


class ConventionViolationError(MarkdownConventionError):
    """Raised when well-formed markdown does not follow the authoring convention."""

    pass

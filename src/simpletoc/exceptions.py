"""Custom exceptions for simpletoc."""


class SimpletocError(Exception):
    """Base exception for simpletoc operations."""


class FetchError(SimpletocError):
    """Error while loading a document from a URL."""


class ParseError(SimpletocError):
    """Error while reading headings from a document."""


class TargetNotFoundError(ParseError):
    """A root or target selector matched no element in the document."""

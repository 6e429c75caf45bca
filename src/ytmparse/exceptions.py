"""Custom exceptions for ytmparse.

Parsers are total: a missing field becomes a default and an item without an
identity is dropped. The only error a parser raises is
``StructureMismatchError``. All exceptions include an HTTP status_code
attribute for easy integration with web frameworks.
"""


class YTMParseError(Exception):
    """Base exception for ytmparse.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class StructureMismatchError(YTMParseError):
    """Document does not describe the requested item.

    Raised when a caller asks for a specific item (e.g. the panel renderer
    for a given video id) and the document holds it in no recognized shape.
    """

    status_code: int = 422  # Unprocessable Entity


class APIError(YTMParseError):
    """YouTube Music API error.

    Raised when the underlying API request fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


class DocumentLoadError(YTMParseError):
    """A saved response document could not be read or decoded."""

    status_code: int = 400  # Bad Request

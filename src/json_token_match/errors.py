"""Exception types raised by json-token-match.

Only fatal conditions are raised.  Structural and value differences between
two well-formed documents are never exceptions; they are reported as
``Mismatch`` records on the ``ComparisonResult``.
"""

from __future__ import annotations

__all__ = ["JsonParseError", "JsonTokenMatchError"]


class JsonTokenMatchError(Exception):
    """Base class for all errors raised by this package."""


class JsonParseError(JsonTokenMatchError, ValueError):
    """Raised when the expected or actual text is not well-formed JSON.

    Raised before any traversal starts, so no partial result exists.

    Attributes:
        document: Which side failed to parse (``"expected"`` or ``"actual"``).
        msg:      The underlying parser message.
        lineno:   1-based line of the failure.
        colno:    1-based column of the failure.
    """

    def __init__(self, document: str, msg: str, lineno: int, colno: int) -> None:
        self.document = document
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        super().__init__(
            f"Malformed {document} JSON: {msg} (line {lineno}, column {colno})"
        )

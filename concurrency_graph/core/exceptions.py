"""Errors raised by Concurrency Graph."""

from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Raised when a serialized graph cannot be decoded.

    Covers malformed JSON as well as payloads whose fields have the wrong
    shape (e.g. ``is_command`` given as a string).

    Attributes:
        source_path: Provenance of the payload that failed, if known.
    """

    def __init__(self, message: str, source_path: Optional[str] = None) -> None:
        if source_path:
            message = f"{source_path}: {message}"
        super().__init__(message)
        self.source_path = source_path

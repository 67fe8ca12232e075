"""Failure modes surfaced by the speech commands."""

from __future__ import annotations

from pathlib import Path


class CoralineError(RuntimeError):
    """Base class for errors that abort a coraline invocation."""


class MissingCredentialError(CoralineError):
    """Raised when no API key is configured."""

    def __init__(self, variable: str = "OPENAI_API_KEY") -> None:
        super().__init__(f"You need to have {variable} present in your env.")
        self.variable = variable


class OutputExistsError(CoralineError):
    """Raised when the destination file is already on disk."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Output file already exists. Please provide a different file name. File: {path}")
        self.path = path


class SourceFileError(CoralineError):
    """Raised when the input text or audio cannot be used."""


class OutputFileError(CoralineError):
    """Raised when the response cannot be written to the destination."""


class SpeechApiTransportError(CoralineError):
    """Raised when the HTTP request itself fails (DNS, TLS, timeout, ...)."""


class SpeechApiError(CoralineError):
    """Raised for 4xx/5xx responses from the speech API."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Error from OpenAI's API ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class ConfigurationError(CoralineError):
    """Raised for invalid settings or command-line options."""

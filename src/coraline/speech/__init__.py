"""Speech synthesis and transcription against the cloud API."""

from .client import SpeechApiClient
from .errors import (
    ConfigurationError,
    CoralineError,
    MissingCredentialError,
    OutputExistsError,
    OutputFileError,
    SourceFileError,
    SpeechApiError,
    SpeechApiTransportError,
)
from .interfaces import SpeechBackend
from .operations import ensure_output_available, synthesize_to_file, transcribe_to_file

__all__ = [
    "ConfigurationError",
    "CoralineError",
    "MissingCredentialError",
    "OutputExistsError",
    "OutputFileError",
    "SourceFileError",
    "SpeechApiClient",
    "SpeechApiError",
    "SpeechApiTransportError",
    "SpeechBackend",
    "ensure_output_available",
    "synthesize_to_file",
    "transcribe_to_file",
]

"""Contracts for speech synthesis and transcription backends."""

from typing import Protocol

from coraline.models import ApiResponse, SynthesisRequest, TranscriptionRequest


class SpeechBackend(Protocol):
    """Performs one synthesis or transcription round trip."""

    def synthesize(self, request: SynthesisRequest) -> ApiResponse:
        """Return the audio response for the given text."""

    def transcribe(self, request: TranscriptionRequest) -> ApiResponse:
        """Return the text response for the uploaded audio."""

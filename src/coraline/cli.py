"""CLI-side handler wrapping the pre-flight checks around each operation."""

from __future__ import annotations

from pathlib import Path

from coraline.config import Settings
from coraline.models import Voice
from coraline.speech import SpeechBackend, ensure_output_available, synthesize_to_file, transcribe_to_file


class CliSpeechHandler:
    """Runs one speak/listen request with the configured models."""

    def __init__(self, backend: SpeechBackend, settings: Settings) -> None:
        self._backend = backend
        self._settings = settings

    def speak(
        self,
        *,
        output_file: str | Path,
        voice: Voice | None = None,
        input_file: str | Path | None = None,
        text: str | None = None,
    ) -> Path:
        target = ensure_output_available(output_file)
        return synthesize_to_file(
            self._backend,
            voice=voice or self._settings.default_voice,
            output_path=target,
            text=text,
            input_path=input_file,
            model=self._settings.speech_model,
        )

    def listen(self, *, input_file: str | Path, output_file: str | Path) -> Path:
        target = ensure_output_available(output_file)
        return transcribe_to_file(
            self._backend,
            input_path=input_file,
            output_path=target,
            model=self._settings.transcription_model,
            response_format=self._settings.transcription_response_format,
        )

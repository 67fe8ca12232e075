from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO

DEFAULT_SPEECH_MODEL = "tts-1"
DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class Voice(str, Enum):
    """Voices accepted by the speech endpoint."""

    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


@dataclass(slots=True)
class SynthesisRequest:
    input: str
    voice: Voice = Voice.ALLOY
    model: str = DEFAULT_SPEECH_MODEL

    def to_payload(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "input": self.input,
            "voice": Voice(self.voice).value,
        }


@dataclass(slots=True)
class TranscriptionRequest:
    file_name: str
    file: BinaryIO
    content_type: str = DEFAULT_CONTENT_TYPE
    model: str = DEFAULT_TRANSCRIPTION_MODEL
    response_format: str = "text"

    def to_form(self) -> dict[str, str]:
        return {"model": self.model, "response_format": self.response_format}

    def to_files(self) -> dict[str, tuple[str, BinaryIO, str]]:
        return {"file": (self.file_name, self.file, self.content_type)}


@dataclass(slots=True)
class ApiResponse:
    status_code: int
    content: bytes
    content_type: str | None = None

    @property
    def is_error(self) -> bool:
        return 400 <= self.status_code < 600

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def guess_content_type(path: str | Path) -> str:
    """MIME type for an upload, falling back to a generic binary type."""
    content_type, _ = mimetypes.guess_type(str(path))
    return content_type or DEFAULT_CONTENT_TYPE

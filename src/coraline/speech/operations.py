"""Read a source file, make one API round trip, write the result."""

from __future__ import annotations

import logging
from pathlib import Path

from coraline.models import (
    DEFAULT_SPEECH_MODEL,
    DEFAULT_TRANSCRIPTION_MODEL,
    SynthesisRequest,
    TranscriptionRequest,
    Voice,
    guess_content_type,
)
from coraline.speech.errors import OutputExistsError, OutputFileError, SourceFileError
from coraline.speech.interfaces import SpeechBackend

logger = logging.getLogger(__name__)


def ensure_output_available(output_path: str | Path) -> Path:
    """Fail before any network call if the destination is already taken."""
    target = Path(output_path).expanduser()
    if target.exists() or target.is_symlink():
        logger.error("Output file already exists. Please provide a different file name.\nFile: %s", target)
        raise OutputExistsError(target)
    return target


def read_source_text(input_path: str | Path) -> str:
    source = Path(input_path).expanduser()
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceFileError(f"Could not read your text file: {source} ({exc})") from exc


def synthesize_to_file(
    backend: SpeechBackend,
    *,
    voice: Voice,
    output_path: str | Path,
    text: str | None = None,
    input_path: str | Path | None = None,
    model: str = DEFAULT_SPEECH_MODEL,
) -> Path:
    """Convert text to audio and save it; the destination is only created on success."""
    if (text is None) == (input_path is None):
        raise ValueError("Provide exactly one of text or input_path")

    source_text = text if text is not None else read_source_text(input_path)
    if not source_text.strip():
        raise SourceFileError("There is no text to speak.")

    response = backend.synthesize(SynthesisRequest(input=source_text, voice=voice, model=model))
    target = _write_output(output_path, response.content)
    logger.info("Successfully saved the audio to: %s", target)
    return target


def transcribe_to_file(
    backend: SpeechBackend,
    *,
    input_path: str | Path,
    output_path: str | Path,
    model: str = DEFAULT_TRANSCRIPTION_MODEL,
    response_format: str = "text",
) -> Path:
    """Upload an audio file for transcription and save the returned text."""
    source = Path(input_path).expanduser()
    try:
        audio_file = source.open("rb")
    except OSError as exc:
        logger.error("Oh no! Could not read your audio file: %s", source)
        raise SourceFileError(f"Could not read your audio file: {source} ({exc})") from exc

    with audio_file:
        request = TranscriptionRequest(
            file_name=source.name,
            file=audio_file,
            content_type=guess_content_type(source),
            model=model,
            response_format=response_format,
        )
        response = backend.transcribe(request)

    target = _write_output(output_path, response.content)
    logger.info("Successfully saved the text to: %s", target)
    return target


def _write_output(output_path: str | Path, content: bytes) -> Path:
    target = Path(output_path).expanduser()
    try:
        with target.open("xb") as handle:
            handle.write(content)
    except FileExistsError as exc:
        raise OutputExistsError(target) from exc
    except OSError as exc:
        raise OutputFileError(f"Could not write output file: {target} ({exc})") from exc
    return target

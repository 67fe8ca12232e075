from __future__ import annotations

import os
from pathlib import Path

import pytest

from coraline.models import Voice
from coraline.speech import SpeechApiClient, synthesize_to_file, transcribe_to_file

pytestmark = pytest.mark.skipif(not os.environ.get("OPENAI_API_KEY"), reason="needs OPENAI_API_KEY")


def test_speak_then_listen_returns_original_text(tmp_path: Path) -> None:
    text = "The quick brown fox jumps over the lazy dog."
    audio = tmp_path / "fox.mp3"
    transcript = tmp_path / "fox.txt"

    with SpeechApiClient(os.environ["OPENAI_API_KEY"]) as client:
        synthesize_to_file(client, voice=Voice.NOVA, text=text, output_path=audio)
        transcribe_to_file(client, input_path=audio, output_path=transcript)

    assert audio.stat().st_size > 0
    assert transcript.read_text(encoding="utf-8").strip() == text

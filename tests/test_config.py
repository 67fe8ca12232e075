from __future__ import annotations

import pytest

from coraline.config import Settings
from coraline.models import Voice
from coraline.speech.errors import MissingCredentialError


def test_settings_read_api_key_without_prefix(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("CORALINE_DEFAULT_VOICE", "shimmer")
    monkeypatch.setenv("CORALINE_SPEECH_MODEL", "tts-1-hd")

    loaded = Settings(_env_file=None)

    assert loaded.require_api_key() == "sk-env"
    assert loaded.default_voice == Voice.SHIMMER
    assert loaded.speech_model == "tts-1-hd"
    assert loaded.transcription_model == "whisper-1"


def test_require_api_key_raises_when_absent(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(MissingCredentialError, match="OPENAI_API_KEY"):
        Settings(_env_file=None).require_api_key()

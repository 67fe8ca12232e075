from __future__ import annotations

import io

import pytest

from coraline.models import ApiResponse, SynthesisRequest, TranscriptionRequest, Voice, guess_content_type


@pytest.mark.parametrize("voice", list(Voice))
def test_synthesis_payload_carries_selected_voice(voice: Voice) -> None:
    payload = SynthesisRequest(input="hello", voice=voice).to_payload()

    assert payload == {"model": "tts-1", "input": "hello", "voice": voice.value}


def test_voice_enum_is_closed_set_of_six() -> None:
    assert [v.value for v in Voice] == ["alloy", "echo", "fable", "onyx", "nova", "shimmer"]


def test_transcription_request_form_and_files() -> None:
    handle = io.BytesIO(b"RIFF")
    request = TranscriptionRequest(file_name="clip.mp3", file=handle, content_type="audio/mpeg")

    assert request.to_form() == {"model": "whisper-1", "response_format": "text"}
    assert request.to_files() == {"file": ("clip.mp3", handle, "audio/mpeg")}


def test_guess_content_type_known_extension() -> None:
    assert guess_content_type("speech.mp3") == "audio/mpeg"


def test_guess_content_type_unknown_extension_falls_back_to_binary() -> None:
    assert guess_content_type("recording.zzunknown") == "application/octet-stream"
    assert guess_content_type("no_extension") == "application/octet-stream"


def test_api_response_error_classes() -> None:
    assert ApiResponse(status_code=200, content=b"ok").is_error is False
    assert ApiResponse(status_code=302, content=b"").is_error is False
    assert ApiResponse(status_code=404, content=b"missing").is_error is True
    assert ApiResponse(status_code=503, content=b"down").is_error is True
    assert ApiResponse(status_code=200, content="héllo".encode()).text == "héllo"

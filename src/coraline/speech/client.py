"""HTTP client for OpenAI's audio endpoints.

One blocking POST per call, no retries. Errors are raised as
:mod:`coraline.speech.errors` types so the CLI can report them uniformly.
"""

from __future__ import annotations

import json
import logging

import requests

from coraline.models import ApiResponse, SynthesisRequest, TranscriptionRequest
from coraline.speech.errors import SpeechApiError, SpeechApiTransportError

DEFAULT_BASE_URL = "https://api.openai.com/v1"

logger = logging.getLogger(__name__)


class SpeechApiClient:
    """Thin wrapper over ``requests`` for the speech and transcription endpoints."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 120.0,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    @property
    def speech_url(self) -> str:
        return f"{self._base_url}/audio/speech"

    @property
    def transcriptions_url(self) -> str:
        return f"{self._base_url}/audio/transcriptions"

    def synthesize(self, request: SynthesisRequest) -> ApiResponse:
        payload = request.to_payload()
        logger.info("Voice is: %s", payload["voice"])
        logger.debug("Body is:\n%s", json.dumps(payload))
        return self._post(self.speech_url, json=payload)

    def transcribe(self, request: TranscriptionRequest) -> ApiResponse:
        logger.debug("Uploading %s as %s", request.file_name, request.content_type)
        return self._post(self.transcriptions_url, data=request.to_form(), files=request.to_files())

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> SpeechApiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post(self, url: str, **kwargs) -> ApiResponse:
        logger.info("Sending request to OpenAI's API...")
        try:
            response = self._session.post(
                url,
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout_seconds,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise SpeechApiTransportError(str(exc)) from exc

        logger.info("Response status: %s", response.status_code)
        result = ApiResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("Content-Type"),
        )
        if result.is_error:
            logger.error("Error: %s", result.text)
            raise SpeechApiError(result.status_code, result.text)
        return result

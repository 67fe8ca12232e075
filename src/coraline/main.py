"""CLI startup entrypoint for coraline."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import requests
import typer
from pydantic import ValidationError
from rich import print

from coraline.cli import CliSpeechHandler
from coraline.config import Settings, get_settings
from coraline.models import Voice
from coraline.speech import CoralineError, SpeechApiClient
from coraline.telemetry.logging import configure_logging

app = typer.Typer(help="Text-to-speech and speech-to-text through OpenAI's audio API")


def _fail(exc: Exception) -> typer.Exit:
    print({"error": str(exc)})
    return typer.Exit(code=1)


def _build_session() -> requests.Session:
    return requests.Session()


def _build_client(settings: Settings, api_key: str) -> SpeechApiClient:
    return SpeechApiClient(
        api_key,
        base_url=settings.api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
        session=_build_session(),
    )


def _run(ctx: typer.Context, action: Callable[[CliSpeechHandler], Path]) -> Path:
    settings: Settings = ctx.obj
    try:
        api_key = settings.require_api_key()
        with _build_client(settings, api_key) as client:
            return action(CliSpeechHandler(backend=client, settings=settings))
    except CoralineError as exc:
        raise _fail(exc)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option(None, help="Logging level, e.g. DEBUG or WARNING"),
) -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        raise _fail(exc)

    try:
        configure_logging(log_level or settings.log_level)
    except CoralineError as exc:
        raise _fail(exc)
    ctx.obj = settings


def speak(
    ctx: typer.Context,
    output_file: str = typer.Option(..., "--output-file", "-o", help="Path to save the output audio."),
    input_file: str = typer.Option(
        None, "--input-file", "-i", help="The path to the file that you would like coraline to read"
    ),
    text: str = typer.Option(None, "--text", "-t", help="Literal text to read instead of a file"),
    voice: Voice = typer.Option(None, case_sensitive=False, help="The voice to use."),
) -> None:
    """Convert text to speech and save the audio."""
    if (input_file is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-file or --text")

    saved = _run(
        ctx, lambda handler: handler.speak(output_file=output_file, voice=voice, input_file=input_file, text=text)
    )
    print({"audio_saved": str(saved)})


def listen(
    ctx: typer.Context,
    input_file: str = typer.Option(..., "--input-file", "-i", help="The audio file to transcribe"),
    output_file: str = typer.Option(..., "--output-file", "-o", help="Path to save the transcript."),
) -> None:
    """Transcribe an audio file and save the text."""
    saved = _run(ctx, lambda handler: handler.listen(input_file=input_file, output_file=output_file))
    print({"text_saved": str(saved)})


app.command("speak")(speak)
app.command("text-to-speech", hidden=True)(speak)
app.command("listen")(listen)
app.command("speech-to-text", hidden=True)(listen)


@app.command()
def voices(ctx: typer.Context) -> None:
    """List the voices accepted by the speak command."""
    settings: Settings = ctx.obj
    for voice in Voice:
        default = " (default)" if voice == settings.default_voice else ""
        print(f"{voice.value}{default}")


if __name__ == "__main__":
    app()

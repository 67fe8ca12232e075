"""Command-line speech synthesis and transcription via OpenAI's audio API."""

__version__ = "0.1.0"

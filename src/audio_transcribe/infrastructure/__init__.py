"""Concrete implementations of infrastructure interfaces."""

from .openai_transcriber import OpenAITranscriber
from .temp_audio import audio_suffix, temporary_audio_file

__all__ = ["OpenAITranscriber", "audio_suffix", "temporary_audio_file"]

"""Find audio stream URLs in page source and transcribe audio with Gemini."""

from .client import get_client
from .config import AIConfig, get_ai_config
from .errors import AIServiceError, AnalysisError, FailureKind, TranscriptionError
from .extractor import MAX_SOURCE_CHARS, extract_stream_url_from_source
from .transcriber import NO_TRANSCRIPTION, transcribe_audio

__all__ = [
    "AIConfig",
    "AIServiceError",
    "AnalysisError",
    "FailureKind",
    "MAX_SOURCE_CHARS",
    "NO_TRANSCRIPTION",
    "TranscriptionError",
    "extract_stream_url_from_source",
    "get_ai_config",
    "get_client",
    "transcribe_audio",
]

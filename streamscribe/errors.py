"""Errors raised by the AI helpers."""

from enum import Enum

import openai


class FailureKind(Enum):
    """What actually went wrong behind an AIServiceError."""

    NETWORK = "network"
    AUTH = "auth"
    SERVICE = "service"
    MALFORMED_RESPONSE = "malformed_response"


class AIServiceError(Exception):
    """Base exception for failed AI requests.

    The original exception is chained as __cause__; kind classifies it.
    """

    def __init__(self, message: str, kind: FailureKind = FailureKind.MALFORMED_RESPONSE):
        super().__init__(message)
        self.kind = kind


class AnalysisError(AIServiceError):
    """Raised when stream URL extraction fails."""
    pass


class TranscriptionError(AIServiceError):
    """Raised when audio transcription fails."""
    pass


def classify_failure(error: BaseException) -> FailureKind:
    """Map an exception from the API call to a FailureKind."""
    # APITimeoutError is a subclass of APIConnectionError
    if isinstance(error, openai.APIConnectionError):
        return FailureKind.NETWORK
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return FailureKind.AUTH
    if isinstance(error, openai.APIError):
        return FailureKind.SERVICE
    # Raised by the client constructor itself, e.g. missing credentials
    if isinstance(error, openai.OpenAIError):
        return FailureKind.AUTH
    return FailureKind.MALFORMED_RESPONSE

"""Domain-level errors for the boarding pass pipeline.

Stages raise these; the orchestrator catches every one of them and turns it
into a fallback attempt or a diagnostic string. None of them reaches the
caller of ``BoardingPassPipeline.run``.
"""

from __future__ import annotations

from typing import Any

ERROR_MESSAGES: dict[str, str] = {
    "IMAGE_DECODE_FAILED": "Failed to decode image",
    "OCR_FAILED": "Failed to extract text from image",
    "OCR_EMPTY": "No text recognized in image",
    "MODEL_UNAVAILABLE": "Generative model is not available",
    "MODEL_INVOCATION_FAILED": "Generative model analysis failed",
    "RESPONSE_UNPARSEABLE": "Model response contained no recognizable fields",
    "AIRLINE_LOOKUP_FAILED": "Airline lookup failed",
    "FALLBACK_FAILED": "Fallback scanner failed",
    "FALLBACK_EMPTY": "Fallback scanner found no boarding pass data",
    "STAGE_TIMEOUT": "Pipeline stage timed out",
    "PIPELINE_BUSY": "Pipeline is already processing an image",
    "CANCELLED": "Processing was cancelled",
}


def message_for(code: str) -> str:
    return ERROR_MESSAGES.get(code, code)


class PipelineError(Exception):
    """Base error for pipeline failures.

    Attributes:
        message: Human-readable error message
        error_code: Stable code, key of ERROR_MESSAGES
        details: Additional context
    """

    error_code = "PIPELINE_ERROR"

    def __init__(self, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        self.message = message or message_for(self.error_code)
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ImageDecodeError(PipelineError):
    """The input could not be decoded to a bitmap. Fatal, no fallback."""

    error_code = "IMAGE_DECODE_FAILED"


class TextRecognitionError(PipelineError):
    """OCR failed or recognized nothing. Triggers fallback."""

    error_code = "OCR_FAILED"


class TextRecognitionEmptyError(TextRecognitionError):
    error_code = "OCR_EMPTY"


class ModelUnavailableError(PipelineError):
    """Model capability reports unavailable; never recorded as last_error."""

    error_code = "MODEL_UNAVAILABLE"


class ModelInvocationError(PipelineError):
    error_code = "MODEL_INVOCATION_FAILED"


class ResponseUnparseableError(ModelInvocationError):
    """Every field of the parsed response was absent."""

    error_code = "RESPONSE_UNPARSEABLE"


class FallbackScanError(PipelineError):
    error_code = "FALLBACK_FAILED"

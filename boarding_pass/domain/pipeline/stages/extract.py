from __future__ import annotations

import asyncio

from boarding_pass.application.llm.prompts import build_extract_prompt
from boarding_pass.core.logging import get_logger
from boarding_pass.domain.pipeline.errors import (
    ModelInvocationError,
    ModelUnavailableError,
    ResponseUnparseableError,
    message_for,
)
from boarding_pass.domain.pipeline.models import CandidateRecord, RecognizedText
from boarding_pass.domain.pipeline.parser import parse_response
from boarding_pass.domain.ports.llm_port import ModelSessionPort

logger = get_logger(__name__)


async def run_extract(
    recognized: RecognizedText,
    *,
    model: ModelSessionPort,
    timeout: float | None = None,
) -> CandidateRecord:
    """Ask the model for ``Label: value`` lines and parse them.

    The model is not invoked at all when it reports itself unavailable.
    An all-absent parse is treated the same as a failed invocation.
    """
    if not model.is_available:
        raise ModelUnavailableError()

    prompt = build_extract_prompt(recognized.text)
    try:
        response = await asyncio.wait_for(model.respond(prompt), timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise ModelInvocationError(message_for("STAGE_TIMEOUT"), details={"stage": "extract"}) from exc
    except Exception as exc:
        raise ModelInvocationError(f"Generative model analysis failed: {exc!r}") from exc

    logger.debug("model_response", extra={"text_length": len(response or "")})
    candidate = parse_response(response or "")
    if candidate.is_empty():
        raise ResponseUnparseableError()
    return candidate

from __future__ import annotations

from boarding_pass.core.config import Settings, get_settings
from boarding_pass.core.logging import configure_logging
from boarding_pass.domain.pipeline.orchestrator import BoardingPassPipeline
from boarding_pass.domain.ports.scanner_port import FallbackScannerPort
from boarding_pass.infrastructure.clients.airline_lookup import AirlineLookupService
from boarding_pass.infrastructure.clients.completions_http import CompletionsHttpClient
from boarding_pass.infrastructure.clients.ocr_http import OcrHttpClient


def init_logging(settings: Settings | None = None) -> None:
    s = settings or get_settings()
    configure_logging(s.LOG_LEVEL, json_format=s.LOG_JSON)


def build_ocr_client(settings: Settings | None = None) -> OcrHttpClient:
    s = settings or get_settings()
    return OcrHttpClient(
        base_url=s.OCR_BASE_URL,
        timeout_seconds=s.OCR_TIMEOUT_SECONDS,
        verify_ssl=s.OCR_VERIFY_SSL,
    )


def build_model_session(settings: Settings | None = None) -> CompletionsHttpClient:
    s = settings or get_settings()
    return CompletionsHttpClient(
        base_url=s.LLM_BASE_URL,
        timeout_seconds=s.LLM_TIMEOUT_SECONDS,
        api_key=s.LLM_API_KEY,
        model=s.LLM_MODEL,
        temperature=s.LLM_TEMPERATURE,
        max_tokens=s.LLM_MAX_TOKENS,
        verify_ssl=s.LLM_VERIFY_SSL,
    )


def build_airline_lookup(settings: Settings | None = None) -> AirlineLookupService:
    s = settings or get_settings()
    return AirlineLookupService(
        api_url=s.AIRLINE_API_URL,
        timeout_seconds=s.AIRLINE_TIMEOUT_SECONDS,
        api_key=s.AIRLINE_API_KEY,
    )


def build_pipeline(fallback_scanner: FallbackScannerPort, settings: Settings | None = None) -> BoardingPassPipeline:
    """Wire a pipeline from settings; the fallback scanner is always supplied by the caller."""
    s = settings or get_settings()
    return BoardingPassPipeline(
        ocr_client=build_ocr_client(s),
        model=build_model_session(s),
        airline_lookup=build_airline_lookup(s),
        fallback_scanner=fallback_scanner,
        stage_timeout=s.STAGE_TIMEOUT_SECONDS,
        wait_if_busy=s.WAIT_IF_BUSY,
    )

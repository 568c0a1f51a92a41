"""Domain pipeline orchestrator.

Sequences acquire -> OCR -> primary extraction -> enrichment, or delegates to
the fallback scanner whenever OCR or the model stage yields nothing usable.

Notes:
- Collaborators are injected; no IO happens here directly.
- One invocation at a time per instance (asyncio.Lock). A second call is
  rejected with a BUSY result, or queued when ``wait_if_busy`` is set.
- ``busy`` is cleared on every exit path, including cancellation.
"""

from __future__ import annotations

import asyncio
import time
import uuid

from PIL import Image

from boarding_pass.core.logging import bind_run_id, get_logger, reset_run_id
from boarding_pass.domain.pipeline.errors import (
    FallbackScanError,
    ImageDecodeError,
    ModelInvocationError,
    ModelUnavailableError,
    PipelineError,
    TextRecognitionError,
    message_for,
)
from boarding_pass.domain.pipeline.models import (
    FinalRecord,
    ProcessingState,
    ProcessingStatus,
    RecordSource,
    ScanOutcome,
    ScanResult,
)
from boarding_pass.domain.pipeline.stages.acquire import ImageSource, run_acquire
from boarding_pass.domain.pipeline.stages.enrich import run_enrich
from boarding_pass.domain.pipeline.stages.extract import run_extract
from boarding_pass.domain.pipeline.stages.fallback import run_fallback
from boarding_pass.domain.pipeline.stages.ocr import run_ocr
from boarding_pass.domain.ports.airline_port import AirlineLookupPort
from boarding_pass.domain.ports.llm_port import ModelSessionPort
from boarding_pass.domain.ports.ocr_port import OCRPort
from boarding_pass.domain.ports.scanner_port import FallbackScannerPort
from boarding_pass.observability.metrics import inc_pipeline_run, record_pipeline_duration, timed

logger = get_logger(__name__)

_STATUS_BY_OUTCOME = {
    ScanOutcome.SUCCEEDED: ProcessingStatus.SUCCEEDED,
    ScanOutcome.FALLBACK_SUCCEEDED: ProcessingStatus.FALLBACK_SUCCEEDED,
    ScanOutcome.FAILED: ProcessingStatus.FAILED,
}


class BoardingPassPipeline:
    def __init__(
        self,
        *,
        ocr_client: OCRPort,
        model: ModelSessionPort,
        airline_lookup: AirlineLookupPort,
        fallback_scanner: FallbackScannerPort,
        stage_timeout: float | None = None,
        wait_if_busy: bool = False,
    ) -> None:
        self._ocr_client = ocr_client
        self._model = model
        self._airline_lookup = airline_lookup
        self._fallback_scanner = fallback_scanner
        self._stage_timeout = stage_timeout
        self._wait_if_busy = wait_if_busy
        self._lock = asyncio.Lock()
        self._state = ProcessingState()
        self._current_task: asyncio.Task | None = None

    @property
    def state(self) -> ProcessingState:
        return self._state.model_copy()

    @property
    def is_processing(self) -> bool:
        return self._state.busy

    @property
    def last_error(self) -> str | None:
        return self._state.last_error

    async def analyze(self, image: ImageSource) -> FinalRecord | None:
        """Convenience wrapper returning only the record."""
        result = await self.run(image)
        return result.record

    def cancel(self) -> bool:
        """Cancel the in-flight invocation, if any. Returns True when one was cancelled.

        This cancels the whole task that awaited ``run`` or ``analyze``, not only the
        current stage: a handler awaiting the pipeline receives CancelledError too.
        """
        task = self._current_task
        if task is None or task.done():
            return False
        return task.cancel()

    async def run(self, image: ImageSource) -> ScanResult:
        run_id = uuid.uuid4().hex
        if self._lock.locked() and not self._wait_if_busy:
            logger.warning("pipeline_busy_rejected", extra={"error_code": "PIPELINE_BUSY"})
            inc_pipeline_run(ScanOutcome.BUSY.value)
            return ScanResult(run_id=run_id, outcome=ScanOutcome.BUSY, diagnostic=message_for("PIPELINE_BUSY"))

        async with self._lock:
            token = bind_run_id(run_id)
            self._current_task = asyncio.current_task()
            self._state = ProcessingState(status=ProcessingStatus.PROCESSING, busy=True, last_error=None)
            start = time.perf_counter()
            logger.info("pipeline_started")
            try:
                result = await self._execute(run_id, image)
            except asyncio.CancelledError:
                self._state = ProcessingState(
                    status=ProcessingStatus.IDLE, busy=False, last_error=message_for("CANCELLED")
                )
                inc_pipeline_run("cancelled")
                logger.warning("pipeline_cancelled", extra={"error_code": "CANCELLED"})
                raise
            except Exception as exc:
                logger.exception("pipeline_unexpected_error")
                self._record_error(f"Unexpected pipeline error: {exc!r}")
                result = self._finish(run_id, ScanOutcome.FAILED, RecordSource.NONE, None)
            finally:
                self._state.busy = False
                self._current_task = None
                reset_run_id(token)

            record_pipeline_duration(time.perf_counter() - start)
            inc_pipeline_run(result.outcome.value)
            logger.info(
                "pipeline_completed",
                extra={"outcome": result.outcome.value, "source": result.source.value},
            )
            return result

    async def _execute(self, run_id: str, image: ImageSource) -> ScanResult:
        try:
            bitmap = run_acquire(image)
        except ImageDecodeError as exc:
            # the fallback scanner needs the same image, so there is nothing to fall back to
            self._record_stage_error("acquire", exc)
            return self._finish(run_id, ScanOutcome.FAILED, RecordSource.NONE, None)

        # a caller-supplied bitmap reaches the fallback scanner untouched
        original = image if isinstance(image, Image.Image) else bitmap

        try:
            with timed("ocr"):
                recognized = await run_ocr(bitmap, ocr_client=self._ocr_client, timeout=self._stage_timeout)
        except TextRecognitionError as exc:
            self._record_stage_error("ocr", exc)
            return await self._fallback(run_id, original)
        logger.info("ocr_completed", extra={"text_length": len(recognized.text)})

        try:
            with timed("extract"):
                candidate = await run_extract(recognized, model=self._model, timeout=self._stage_timeout)
        except ModelUnavailableError:
            logger.info("model_unavailable_skipping_primary", extra={"stage": "extract"})
            return await self._fallback(run_id, original)
        except ModelInvocationError as exc:
            self._record_stage_error("extract", exc)
            return await self._fallback(run_id, original)

        with timed("enrich"):
            record = await run_enrich(candidate, lookup=self._airline_lookup)
        logger.info("primary_extraction_succeeded", extra={"flight_number": record.flight_number, "airline": record.airline})
        return self._finish(run_id, ScanOutcome.SUCCEEDED, RecordSource.PRIMARY, record)

    async def _fallback(self, run_id: str, image: Image.Image) -> ScanResult:
        logger.info("fallback_scanner_started", extra={"stage": "fallback"})
        try:
            with timed("fallback"):
                record = await run_fallback(image, scanner=self._fallback_scanner, timeout=self._stage_timeout)
        except FallbackScanError as exc:
            self._record_stage_error("fallback", exc)
            return self._finish(run_id, ScanOutcome.FAILED, RecordSource.NONE, None)

        if record is None:
            if self._state.last_error is None:
                self._record_error(message_for("FALLBACK_EMPTY"))
            return self._finish(run_id, ScanOutcome.FAILED, RecordSource.NONE, None)
        return self._finish(run_id, ScanOutcome.FALLBACK_SUCCEEDED, RecordSource.FALLBACK, record)

    def _record_stage_error(self, stage: str, exc: PipelineError) -> None:
        logger.warning(
            "stage_failed",
            extra={"stage": stage, "error_code": exc.error_code},
            exc_info=exc.__cause__ or exc,
        )
        self._record_error(exc.message)

    def _record_error(self, message: str) -> None:
        self._state.last_error = message

    def _finish(
        self,
        run_id: str,
        outcome: ScanOutcome,
        source: RecordSource,
        record: FinalRecord | None,
    ) -> ScanResult:
        self._state.status = _STATUS_BY_OUTCOME[outcome]
        return ScanResult(
            run_id=run_id,
            outcome=outcome,
            source=source,
            record=record,
            diagnostic=self._state.last_error,
        )

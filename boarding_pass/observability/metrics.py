from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram

pipeline_runs_total = Counter(
    "bp_pipeline_runs_total",
    "Boarding pass pipeline invocations by outcome",
    labelnames=("outcome",),
)
pipeline_duration_seconds = Histogram(
    "bp_pipeline_duration_seconds",
    "End-to-end pipeline duration in seconds",
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 60.0),
)
stage_duration_seconds = Histogram(
    "bp_stage_duration_seconds",
    "Pipeline stage duration in seconds",
    labelnames=("stage",),
    buckets=(0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0, 10.0),
)
airline_lookups_total = Counter(
    "bp_airline_lookups_total",
    "Airline lookups by result",
    labelnames=("result",),
)


def inc_pipeline_run(outcome: str) -> None:
    pipeline_runs_total.labels(outcome=outcome).inc()


def record_pipeline_duration(seconds: float) -> None:
    pipeline_duration_seconds.observe(seconds)


def record_stage_duration(stage: str, seconds: float) -> None:
    stage_duration_seconds.labels(stage=stage).observe(seconds)


def inc_airline_lookup(result: str) -> None:
    airline_lookups_total.labels(result=result).inc()


@contextmanager
def timed(stage: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        record_stage_duration(stage, time.perf_counter() - start)

from __future__ import annotations

import logging
import sys
from typing import Optional

from fastapi import FastAPI

from packages.core.config import Settings, load_settings

try:
    from opentelemetry import trace
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
        OTLPSpanExporter,
    )
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
except Exception:  # pragma: no cover - optional dependency resolution
    trace = None
    FastAPIInstrumentor = None


logger = logging.getLogger("scheduler.api")


def init_observability(
    app: FastAPI,
    settings: Optional[Settings] = None,
    service_name: str = "event-scheduler",
) -> bool:
    """Install a tracer provider and instrument ``app`` when enabled.

    Returns True when tracing was switched on.
    """
    settings = settings or load_settings()
    if "pytest" in sys.modules or not settings.otel_enabled:
        return False
    if trace is None or FastAPIInstrumentor is None:
        logger.warning(
            "OpenTelemetry not available. "
            "Install the observability extra to enable tracing."
        )
        return False

    if not isinstance(trace.get_tracer_provider(), TracerProvider):
        provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
        if settings.otel_endpoint:
            exporter = OTLPSpanExporter(endpoint=settings.otel_endpoint)
        else:
            exporter = ConsoleSpanExporter()
        provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)
    logger.info("tracing_enabled endpoint=%s", settings.otel_endpoint or "console")
    return True

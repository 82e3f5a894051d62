"""Logging and OpenTelemetry wiring for the order service."""

import logging
import os
from typing import Any

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from pythonjsonlogger import jsonlogger

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_NAME = "restaurant-order-svc"
DEFAULT_OTLP_ENDPOINT = "http://localhost:4318"
METRIC_EXPORT_INTERVAL_MS = 60000


def otlp_endpoint(signal: str) -> str:
    """Build the OTLP/HTTP URL for one signal ("traces" or "metrics")."""
    base = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", DEFAULT_OTLP_ENDPOINT).rstrip("/")
    return f"{base}/v1/{signal}"


def get_service_resource() -> Resource:
    """Describe this service to the collector.

    Returns:
        Resource carrying service name, version and deployment environment
    """
    return Resource.create(
        {
            SERVICE_NAME: os.getenv("OTEL_SERVICE_NAME", DEFAULT_SERVICE_NAME),
            SERVICE_VERSION: "1.0.0",
            "deployment.environment": os.getenv("ENVIRONMENT", "development"),
        }
    )


def setup_tracing(resource: Resource) -> None:
    """Install a tracer provider that batches spans to the OTLP collector."""
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=otlp_endpoint("traces"))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    logger.info(f"Exporting dish and order spans to {otlp_endpoint('traces')}")


def setup_metrics(resource: Resource) -> None:
    """Install a meter provider that pushes write and rejection counters periodically."""
    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=otlp_endpoint("metrics")),
        export_interval_millis=METRIC_EXPORT_INTERVAL_MS,
    )
    metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))

    logger.info(f"Exporting dish and order metrics to {otlp_endpoint('metrics')}")


def setup_observability(app: Any = None, enable_exporters: bool = True) -> None:
    """Install tracing and metrics providers and instrument the HTTP routes.

    With exporters off, spans and counters are still produced by the SDK
    providers but never leave the process. ``ENVIRONMENT=test`` always turns
    exporters off.

    Args:
        app: FastAPI application whose routes get request spans, or None
        enable_exporters: Whether to ship telemetry to the OTLP collector
    """
    exporting = enable_exporters and os.getenv("ENVIRONMENT", "development") != "test"
    resource = get_service_resource()

    if exporting:
        setup_tracing(resource)
        setup_metrics(resource)
    else:
        trace.set_tracer_provider(TracerProvider(resource=resource))
        metrics.set_meter_provider(MeterProvider(resource=resource))

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)

    logger.info(
        "Observability configured",
        extra={"exporting": exporting, "instrumented_routes": app is not None},
    )


def configure_logging(log_level: str = "INFO") -> None:
    """Send every log record to stderr as one JSON object per line.

    ``LOG_LEVEL`` in the environment wins over the argument. Rejected requests
    log at INFO from the validation chains and at WARNING from the HTTP layer.

    Args:
        log_level: Fallback level name when LOG_LEVEL is unset
    """
    level_name = os.getenv("LOG_LEVEL", log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
            timestamp=True,
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logger.info(f"JSON logging configured at {level_name}")

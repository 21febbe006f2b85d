"""Observability setup for OpenTelemetry, metrics, and structured logging."""

import logging

from opentelemetry import trace, metrics
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from prometheus_client import Counter, Histogram, generate_latest, CollectorRegistry
import structlog

from .config import settings

SERVICE_NAME = "mtp-admin-api"
SERVICE_VERSION = "1.0.0"

# Prometheus metrics
REGISTRY = CollectorRegistry()

# Request metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code'],
    registry=REGISTRY
)

REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=REGISTRY
)

# Business metrics
RESOURCES_CREATED = Counter(
    'dashboard_resources_created_total',
    'Total records created',
    ['resource'],
    registry=REGISTRY
)

RESOURCES_DELETED = Counter(
    'dashboard_resources_deleted_total',
    'Total records deleted',
    ['resource'],
    registry=REGISTRY
)

FIELD_CHANGES = Counter(
    'dashboard_field_changes_total',
    'Single-field transitions such as status, priority or assignment',
    ['resource', 'field', 'value'],
    registry=REGISTRY
)

RESPONSES_ADDED = Counter(
    'dashboard_responses_added_total',
    'Responses appended to tickets, inquiries and feedback',
    ['resource'],
    registry=REGISTRY
)

SIGNIN_ATTEMPTS = Counter(
    'dashboard_signin_attempts_total',
    'Admin sign-in attempts',
    ['outcome'],
    registry=REGISTRY
)

FILES_UPLOADED = Counter(
    'dashboard_files_uploaded_total',
    'Files written to the upload directory',
    ['kind'],
    registry=REGISTRY
)


def setup_structured_logging():
    """Configure structured logging with structlog."""

    def add_trace_context(logger, method_name, event_dict):
        """Add trace context to log events."""
        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            event_dict['trace_id'] = format(ctx.trace_id, '032x')
            event_dict['span_id'] = format(ctx.span_id, '016x')
        return event_dict

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_trace_context,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _resource() -> Resource:
    return Resource.create({
        "service.name": SERVICE_NAME,
        "service.version": SERVICE_VERSION,
        "environment": settings.environment,
    })


def setup_tracing():
    """Setup OpenTelemetry tracing."""
    provider = TracerProvider(resource=_resource())

    if settings.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(provider)
    return trace.get_tracer(__name__)


def setup_metrics():
    """Setup OpenTelemetry metrics."""
    if settings.otlp_endpoint:
        otlp_exporter = OTLPMetricExporter(endpoint=settings.otlp_endpoint)
        reader = PeriodicExportingMetricReader(exporter=otlp_exporter, export_interval_millis=60000)
        metrics.set_meter_provider(MeterProvider(resource=_resource(), metric_readers=[reader]))

    return metrics.get_meter(__name__)


def instrument_fastapi(app):
    """Instrument FastAPI with OpenTelemetry."""
    FastAPIInstrumentor.instrument_app(app)


def instrument_sqlalchemy():
    """Instrument SQLAlchemy with OpenTelemetry."""
    SQLAlchemyInstrumentor().instrument()


class MetricsCollector:
    """Collector for business metrics."""

    @staticmethod
    def record_created(resource: str):
        RESOURCES_CREATED.labels(resource=resource).inc()

    @staticmethod
    def record_deleted(resource: str):
        RESOURCES_DELETED.labels(resource=resource).inc()

    @staticmethod
    def record_field_change(resource: str, field: str, value: str):
        """Record a status, priority or assignment change."""
        FIELD_CHANGES.labels(resource=resource, field=field, value=value).inc()

    @staticmethod
    def record_response_added(resource: str):
        RESPONSES_ADDED.labels(resource=resource).inc()

    @staticmethod
    def record_signin(outcome: str):
        SIGNIN_ATTEMPTS.labels(outcome=outcome).inc()

    @staticmethod
    def record_upload(kind: str, count: int = 1):
        FILES_UPLOADED.labels(kind=kind).inc(count)

    @staticmethod
    def record_request(method: str, endpoint: str, status_code: int, duration: float):
        """Record one HTTP request for the Prometheus endpoint."""
        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status_code=str(status_code)).inc()
        REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration)


def get_prometheus_metrics():
    """Get Prometheus metrics for the /metrics endpoint."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()


def get_logger(name: str):
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)

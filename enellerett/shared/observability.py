# enellerett/shared/observability.py
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from enellerett import __version__
from enellerett.shared.config import settings

# Health probes are polled constantly and carry no lookup.
EXCLUDED_URLS = "health/live,health/ready"


def setup_observability(app: FastAPI) -> TracerProvider:
    """
    Turns on tracing (OTEL_ENABLED=true).

    Every request gets a server span from the FastAPI instrumentation; the
    `use_case.lookup_noun` span opened by LookupNoun nests under it. With
    DEBUG on, finished spans are printed to stdout.
    """
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.version": __version__,
        "deployment.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)
    if settings.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(
        app, tracer_provider=provider, excluded_urls=EXCLUDED_URLS
    )
    return provider


def get_tracer(name: str):
    """Tracer for use-case spans; a no-op tracer until tracing is turned on."""
    return trace.get_tracer(name)

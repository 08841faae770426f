from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import enum
from typing import Any, Iterator, Optional


try:
    # Try to import the optional opentelemetry libraries. If they aren't installed then
    # short circuit the initialization which results in the pretend tracer being used
    # by any spans defined in the code.
    from opentelemetry import trace
    from opentelemetry.sdk.resources import SERVICE_NAME, Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import (
        BatchSpanProcessor,
        ConsoleSpanExporter,
        SpanExporter,
    )
except ImportError:
    # This indicates we don't have the libraries installed, thus disable tracing.
    trace: Optional[Any] = None  # type:ignore # already defined by import


class TraceScheme(str, enum.Enum):
    """Define supported schemes/export types.

    This is used as validation when reading environment and other configuration values.
    """

    otlp_https = "otlp+https"
    otlp_http = "otlp+http"
    otlp_grpc = "otlp+grpc"
    console = "console"


@dataclass
class TracerConfig:
    """Define configuration for a trace collector/exporter."""

    scheme: TraceScheme
    host: str


def _build_exporter(tracer_config: TracerConfig) -> SpanExporter:
    if tracer_config.scheme == TraceScheme.console:
        return ConsoleSpanExporter()

    if tracer_config.scheme in (TraceScheme.otlp_http, TraceScheme.otlp_https):
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter as OTLPHTTPSpanExporter,
        )

        scheme = "https" if tracer_config.scheme == TraceScheme.otlp_https else "http"
        return OTLPHTTPSpanExporter(endpoint=f"{scheme}://{tracer_config.host}")

    if tracer_config.scheme == TraceScheme.otlp_grpc:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter as OTLPGRPCSpanExporter,
        )

        return OTLPGRPCSpanExporter(endpoint=tracer_config.host)

    raise ValueError(
        f"{tracer_config.scheme} is not a supported tracer scheme."
        f'[{",".join(TraceScheme)}]'
    )


def initialize_tracer():
    """Initialize the tracer with any exporters configured.

    Applications embedding requestkit which already configure OpenTelemetry don't need
    to call this. Otherwise call it once during startup.
    """
    from .conf import settings  # prevent circular import due to model validation
    from .logging import logger  # prevent circular import

    if not trace or not settings.TRACING_EXPORTERS:
        return

    logger.debug("Initializing tracing...")
    resource = Resource(attributes={SERVICE_NAME: settings.TRACING_RESOURCE_NAME})
    trace_provider = TracerProvider(resource=resource)

    for tracer_config in settings.TRACING_EXPORTERS:
        trace_provider.add_span_processor(
            BatchSpanProcessor(_build_exporter(tracer_config))
        )

    trace.set_tracer_provider(trace_provider)


def get_tracer(*args, **kwargs) -> Any:
    """Get a tracer that can be used if tracing is enabled."""
    from .conf import settings  # prevent circular import due to model validation

    if trace is not None:
        return trace.get_tracer(settings.TRACING_RESOURCE_NAME, *args, **kwargs)
    else:
        return pretendtracer()


class pretendspan:
    """Accepts span calls and records nothing."""

    def __getattr__(self, name):
        return self.fake_func

    def fake_func(self, *args, **kwargs):
        return


class pretendtracer:
    """Class to accept anything and return nothing when tracing has not been enabled."""

    @contextmanager
    def start_as_current_span(self, *args, **kwargs) -> Iterator[pretendspan]:
        yield pretendspan()

    def fake_func(self, *args, **kwargs):
        """You can't fake the funk.

        Wait, we just did.
        """
        return

    def __getattr__(self, name):
        return self.fake_func

    def __setattr__(self, name, value):
        return

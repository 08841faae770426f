from pytest_mock import MockerFixture

from requestkit import build_query_request
from requestkit.tracing import get_tracer, initialize_tracer, pretendtracer


def test_get_tracer__without_opentelemetry(mocker: MockerFixture):
    mocker.patch("requestkit.tracing.trace", None)

    assert isinstance(get_tracer(), pretendtracer)


def test_pretendtracer__span_context_manager():
    with pretendtracer().start_as_current_span("name", attributes={}) as span:
        assert span.set_attribute("a", 1) is None
        assert span.record_exception(ValueError()) is None


def test_builder__without_opentelemetry(mocker: MockerFixture):
    mocker.patch("requestkit.tracing.trace", None)

    request = build_query_request("https://x.test/", {}, {"q": "1"}).unwrap()

    assert request.url == "https://x.test/?q=1"


def test_initialize_tracer__no_exporters(mocker: MockerFixture):
    trace_mock = mocker.patch("requestkit.tracing.trace")
    mocker.patch("requestkit.conf.settings.TRACING_EXPORTERS", None)

    initialize_tracer()

    trace_mock.set_tracer_provider.assert_not_called()

import pytest

from requestkit.exceptions import EncodingError, URLConstructionError
from requestkit.http import Request
from requestkit.result import BuildResult

REQUEST = Request(url="https://x.test/")


def test_build_result__success():
    result = BuildResult.success(REQUEST)

    assert result.ok
    assert bool(result) is True
    assert result.error is None
    assert result.unwrap() is REQUEST


def test_build_result__failure():
    error = URLConstructionError("bad url")
    result = BuildResult.failure(error)

    assert not result.ok
    assert bool(result) is False
    assert result.request is None
    assert result.error is error


def test_build_result__failure_unwrap():
    result = BuildResult.failure(EncodingError("bad body"))

    with pytest.raises(EncodingError, match="bad body"):
        result.unwrap()


def test_build_result__requires_exactly_one():
    with pytest.raises(ValueError):
        BuildResult()

    with pytest.raises(ValueError):
        BuildResult(request=REQUEST, error=EncodingError("both"))

"""Build :class:`~requestkit.http.Request` objects from a url, headers, and a body.

Three kinds of body are supported:

- A mapping sent as JSON, or as ``application/x-www-form-urlencoded`` style pairs.
  (:func:`build_json_or_form_request`)
- A string sent as is. (:func:`build_string_body_request`)
- A mapping sent as the url's query string. (:func:`build_query_request`)

Headers are always set exactly as given. Nothing (e.g. ``Content-Type``) is added on
the caller's behalf. Every request bypasses local and remote caches.

None of the builders raise when the data can't be encoded. They return a
:class:`~requestkit.result.BuildResult` instead:

.. code-block:: python

   result = build_json_or_form_request(
       "https://api.example.com/v1/things",
       {"Content-Type": "application/json"},
       {"name": "thing", "count": 2},
   )
   request = result.unwrap()
"""
from typing import Mapping, Optional, Union
from urllib.parse import SplitResult, urlsplit

from .conf import settings
from .exceptions import EncodingError, URLConstructionError
from .http import cache_policy, http_method, Request
from .logging import logger
from .result import BuildResult
from .tracing import get_tracer
from .utils.encoder import encode_json_body, JSONObject
from .utils.query import encode_query, string_fields

MethodType = Union[http_method, str]


def _timeout(timeout: Optional[float]) -> float:
    if timeout is None:
        return settings.DEFAULT_TIMEOUT
    if not timeout > 0:
        raise ValueError(f"timeout must be positive, got {timeout}")
    return float(timeout)


def _request(
    url: str,
    headers: Mapping[str, str],
    body: Optional[bytes],
    method: MethodType,
    timeout: Optional[float],
) -> Request:
    return Request(
        url=url,
        headers=headers,
        body=body,
        method=http_method(method),
        timeout=_timeout(timeout),
        cache=cache_policy.reload_ignoring_local_and_remote_cache,
    )


def build_json_or_form_request(
    url: str,
    headers: Mapping[str, str],
    body_fields: JSONObject,
    as_json: bool = True,
    timeout: Optional[float] = None,
    method: MethodType = http_method.POST,
) -> BuildResult:
    """Build a request whose body is ``body_fields`` encoded as JSON or form pairs.

    When ``as_json`` is false only the fields with string values are sent. They are
    percent encoded as ``key=value`` pairs joined by ``&``. Other fields are dropped.

    Args:
        url: The url of the request.
        headers: A complete set of headers for the request.
        body_fields: The data to send with the request.
        as_json: Encode the payload as JSON or as key=value pairs. *Default is True*
        timeout: Timeout in seconds. *Default is* ``settings.DEFAULT_TIMEOUT``
        method: The HTTP method. *Default is POST*

    Returns:
        The request, or an :class:`~requestkit.exceptions.EncodingError` if the body
        couldn't be encoded.
    """
    method = http_method(method)
    with get_tracer().start_as_current_span("build_json_or_form_request") as span:
        span.set_attribute("http.method", method.value)
        span.set_attribute("http.url", url)
        span.set_attribute("requestkit.as_json", as_json)

        try:
            if as_json:
                body = encode_json_body(body_fields)
            else:
                body = encode_query(string_fields(body_fields)).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as e:
            # UnicodeEncodeError is a ValueError. RecursionError comes from very deep
            # nesting.
            kind = "JSON" if as_json else "form"
            logger.warning(f"Unable to encode {kind} body for {url}: {e}")
            error = EncodingError(f"Unable to encode {kind} body: {e}")
            error.__cause__ = e
            return BuildResult.failure(error)

        logger.debug(f"Built {method.value} {url} with a {len(body)} byte body")
        return BuildResult.success(_request(url, headers, body, method, timeout))


def build_string_body_request(
    url: str,
    headers: Mapping[str, str],
    body: str,
    timeout: Optional[float] = None,
    method: MethodType = http_method.POST,
) -> BuildResult:
    """Build a request which sends ``body`` as UTF-8 text.

    Args:
        url: The url of the request.
        headers: A complete set of headers for the request.
        body: The text to send with the request.
        timeout: Timeout in seconds. *Default is* ``settings.DEFAULT_TIMEOUT``
        method: The HTTP method. *Default is POST*

    Returns:
        The request, or an :class:`~requestkit.exceptions.EncodingError` if ``body``
        can't be represented as UTF-8 (e.g. it contains lone surrogates).
    """
    method = http_method(method)
    with get_tracer().start_as_current_span("build_string_body_request") as span:
        span.set_attribute("http.method", method.value)
        span.set_attribute("http.url", url)

        try:
            encoded = body.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning(f"Unable to encode string body for {url}: {e}")
            error = EncodingError(f"Unable to encode body as UTF-8: {e}")
            error.__cause__ = e
            return BuildResult.failure(error)

        logger.debug(f"Built {method.value} {url} with a {len(encoded)} byte body")
        return BuildResult.success(_request(url, headers, encoded, method, timeout))


def _split_base_url(url: str) -> SplitResult:
    """Split and validate the base url a query will be added to.

    Raises:
        ValueError: the url is malformed.
    """
    parts = urlsplit(url)
    # Accessing the port validates it.
    parts.port
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"'{url}' is not an absolute url")
    if any(c.isspace() for c in url):
        raise ValueError(f"'{url}' contains whitespace")
    return parts


def build_query_request(
    url: str,
    headers: Mapping[str, str],
    parameters: Mapping[str, str],
    timeout: Optional[float] = None,
) -> BuildResult:
    """Build a ``GET`` request with ``parameters`` as the url's query string.

    Any query already on ``url`` is replaced. A fragment is kept.

    Args:
        url: The base url of the request.
        headers: A complete set of headers for the request.
        parameters: The query parameters.
        timeout: Timeout in seconds. *Default is* ``settings.DEFAULT_TIMEOUT``

    Returns:
        The request, or an :class:`~requestkit.exceptions.URLConstructionError` if the
        url couldn't be formed.
    """
    with get_tracer().start_as_current_span("build_query_request") as span:
        span.set_attribute("http.method", http_method.GET.value)
        span.set_attribute("http.url", url)

        try:
            parts = _split_base_url(url)
            query = encode_query(parameters.items())
        except (TypeError, ValueError) as e:
            logger.warning(f"Unable to add query parameters to {url}: {e}")
            error = URLConstructionError(f"Unable to build url from '{url}': {e}")
            error.__cause__ = e
            return BuildResult.failure(error)

        full_url = parts._replace(query=query).geturl()
        logger.debug(f"Built GET {full_url}")
        return BuildResult.success(
            _request(full_url, headers, None, http_method.GET, timeout)
        )

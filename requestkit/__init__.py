"""Build HTTP request descriptions from a url, headers, and a body."""
from .builder import (
    build_json_or_form_request,
    build_query_request,
    build_string_body_request,
)
from .exceptions import EncodingError, RequestKitException, URLConstructionError
from .http import cache_policy, http_method, Request
from .result import BuildResult

__version__ = "0.1.0"

__all__ = (
    "BuildResult",
    "EncodingError",
    "Request",
    "RequestKitException",
    "URLConstructionError",
    "build_json_or_form_request",
    "build_query_request",
    "build_string_body_request",
    "cache_policy",
    "http_method",
)

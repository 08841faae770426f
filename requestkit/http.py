from dataclasses import dataclass, field
from enum import Enum
import json
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


class http_method(str, Enum):
    """Describes the HTTP methods a request can be built with."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class cache_policy(str, Enum):
    """Describes how a transport should treat cached responses."""

    #: Follow the caching rules of the protocol.
    use_protocol_cache_policy = "use_protocol_cache_policy"
    #: Ignore local and remote (proxy) caches and always load from the origin.
    reload_ignoring_local_and_remote_cache = "reload_ignoring_local_and_remote_cache"


def _read_only_headers(
    headers: Optional[Mapping[str, str]] = None,
) -> Mapping[str, str]:
    return MappingProxyType(dict(headers or {}))


@dataclass(frozen=True)
class Request:
    """Represents an HTTP request ready to be handed to a transport."""

    #: The fully formed url, including any query string.
    url: str
    #: HTTP headers exactly as the caller supplied them.
    headers: Mapping[str, str] = field(default_factory=_read_only_headers)
    #: The encoded body. ``None`` when the request has no body.
    body: Optional[bytes] = None
    method: http_method = http_method.GET
    #: Timeout in seconds.
    timeout: float = 60.0
    cache: cache_policy = cache_policy.reload_ignoring_local_and_remote_cache

    def __post_init__(self):
        # Copy into a read-only view so later changes to the caller's dict are not
        # visible through the request.
        object.__setattr__(self, "headers", _read_only_headers(self.headers))
        object.__setattr__(self, "method", http_method(self.method))

    def text(self) -> str:
        """Return the body decoded as UTF-8."""
        if self.body is None:
            return ""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Return the body decoded as JSON.

        Raises:
            ValueError: the body is missing or is not valid JSON.
        """
        if self.body is None:
            raise ValueError("Request has no body to decode.")
        return json.loads(self.body)

    def asdict(self) -> dict[str, Any]:
        """Create a dictionary representation of this object."""
        return {
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
            "method": self.method.value,
            "timeout": self.timeout,
            "cache": self.cache.value,
        }

    def transport_kwargs(self) -> dict[str, Union[str, float, bytes, dict, None]]:
        """Keyword arguments in the shape most HTTP clients' ``request()`` accept.

        .. code-block:: python

           response = client.request(**request.transport_kwargs())
        """
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "content": self.body,
            "timeout": self.timeout,
        }

"""The outcome of building a request.

Builders never raise for bad input data. Instead they return a :class:`BuildResult`
which carries either the :class:`~requestkit.http.Request` or the error describing why
one could not be made.

.. code-block:: python

   result = build_json_or_form_request(url, headers, fields)
   if not result:
       logger.error(f"Unable to build request: {result.error}")
       return

   send(result.request)
"""
from dataclasses import dataclass
from typing import Optional

from .exceptions import RequestKitException
from .http import Request


@dataclass(frozen=True)
class BuildResult:
    """Either a request or the error which prevented it from being built."""

    request: Optional[Request] = None
    error: Optional[RequestKitException] = None

    def __post_init__(self):
        if (self.request is None) == (self.error is None):
            raise ValueError("A BuildResult must hold exactly one of request or error.")

    @classmethod
    def success(cls, request: Request) -> "BuildResult":
        return cls(request=request)

    @classmethod
    def failure(cls, error: RequestKitException) -> "BuildResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """``True`` when a request was built."""
        return self.request is not None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Request:
        """Return the request or raise the error carried by this result.

        Raises:
            EncodingError: the body could not be encoded.
            URLConstructionError: the url could not be formed.
        """
        if self.request is None:
            assert self.error is not None  # for the type checker
            raise self.error
        return self.request

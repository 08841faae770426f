class RequestKitException(Exception):
    """Generic exception."""


class EncodingError(RequestKitException):
    """The body could not be serialized to the requested representation.

    This covers JSON bodies containing values JSON cannot express (``NaN``, cyclic
    structures, arbitrary objects) and text which cannot be encoded as UTF-8.
    """


class URLConstructionError(RequestKitException):
    """The query could not be merged into the base URL.

    This is raised (or carried by a :class:`~requestkit.result.BuildResult`) when the
    base URL is malformed.
    """

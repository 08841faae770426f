"""Percent-encoding of key/value pairs for query strings and form bodies."""
from typing import Iterable, Mapping, Tuple
from urllib.parse import quote

#: Characters left unescaped in a query component besides ASCII letters and digits.
#: ``&`` and ``=`` are missing because they delimit the pairs.
QUERY_SAFE_CHARACTERS = "!$'()*+,-./:;?@_~"


def percent_encode(value: str) -> str:
    """Percent-encode ``value`` for use as a query key or value.

    Non-ASCII characters are encoded as UTF-8 before escaping. A ``+`` is left as is;
    see :func:`encode_query` for why that doesn't survive.

    Raises:
        TypeError: ``value`` isn't a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected str, not {type(value).__name__}: {value!r}")
    return quote(value, safe=QUERY_SAFE_CHARACTERS, encoding="utf-8", errors="strict")


def encode_query(pairs: Iterable[Tuple[str, str]]) -> str:
    """Encode ``pairs`` as ``key=value`` terms joined by ``&``.

    Many servers decode ``+`` in a query as a space, so every ``+`` is replaced with
    ``%2B`` once the query has been assembled.

    Args:
        pairs: The keys and values to encode, in order.

    Raises:
        TypeError: a key or value isn't a string.
        UnicodeEncodeError: a key or value can't be encoded as UTF-8.

    Returns:
        The percent encoded query without a leading ``?``.
    """
    terms = []
    for key, value in pairs:
        if not isinstance(key, str):
            raise TypeError(f"Query key {key!r} must be str, not {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(
                f"Value of query key '{key}' must be str, not {type(value).__name__}"
            )
        terms.append(f"{percent_encode(key)}={percent_encode(value)}")
    return "&".join(terms).replace("+", "%2B")


def string_fields(fields: Mapping[str, object]) -> list[Tuple[str, str]]:
    """Return the items of ``fields`` whose values are strings.

    Anything else can't be sent as a form field and is skipped.
    """
    return [(k, v) for k, v in fields.items() if isinstance(v, str)]

import datetime
import decimal
import json
from typing import Any, Mapping, Sequence, Union
import uuid

#: Values which can be expressed in JSON.
JSONValue = Union[
    str,
    int,
    float,
    bool,
    None,
    Mapping[str, "JSONValue"],
    Sequence["JSONValue"],
]
#: The top level of a JSON request body.
JSONObject = Mapping[str, JSONValue]


class RequestKitJSONEncoder(json.JSONEncoder):
    """JSON encoder adding support for a few common python data types.

    Unlike the default encoder of many projects this one never falls back to ``str()``
    for unknown objects. A value which isn't listed below fails the encoding.

    Usage:

    .. code::python

       json.dumps(my_value, cls=RequestKitJSONEncoder)
    """

    def default(self, obj) -> Any:
        """Encode objects to JSON values.

        Args:
            obj: The object to encode.

        Raises:
            TypeError: ``obj`` has no JSON representation.
            ValueError: ``obj`` is a non-finite :class:`decimal.Decimal`.

        Return:
            A valid type suitable for JSON encoding.
        """
        if isinstance(obj, decimal.Decimal):
            if not obj.is_finite():
                raise ValueError(
                    f"Out of range Decimal value is not JSON compliant: {obj}"
                )
            return str(obj)
        elif isinstance(obj, (datetime.datetime, datetime.date)):
            return obj.isoformat()
        elif isinstance(obj, uuid.UUID):
            return str(obj)
        return super().default(obj)


def _check_keys(fields: JSONObject):
    """Ensure every mapping in ``fields`` only has string keys.

    :func:`json.dumps` would otherwise turn ``1`` into ``"1"`` and the body would no
    longer decode to the original mapping.

    Raises:
        TypeError: a mapping has a key which isn't a string.
    """
    pending: list[Any] = [fields]
    while pending:
        value = pending.pop()
        if isinstance(value, Mapping):
            for key, item in value.items():
                if not isinstance(key, str):
                    raise TypeError(
                        f"keys must be str, not {type(key).__name__}: {key!r}"
                    )
                pending.append(item)
        elif isinstance(value, (list, tuple)):
            pending.extend(value)


def encode_json_body(fields: JSONObject) -> bytes:
    """Serialize ``fields`` to compact UTF-8 JSON.

    Args:
        fields: The mapping to encode.

    Raises:
        TypeError: a value has no JSON representation or a key isn't a string.
        ValueError: a value is a non-finite number or the structure is cyclic.
        RecursionError: the structure is nested too deeply.

    Returns:
        The encoded payload.
    """
    body = json.dumps(
        fields,
        cls=RequestKitJSONEncoder,
        allow_nan=False,
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")
    # Runs after encoding so cyclic structures have already been rejected.
    _check_keys(fields)
    return body

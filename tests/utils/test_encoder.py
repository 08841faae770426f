import datetime
from decimal import Decimal
import json
import uuid

import pytest

from requestkit.utils.encoder import encode_json_body, RequestKitJSONEncoder


def test_encode_json_body__compact():
    assert encode_json_body({"a": [1, 2], "b": None}) == b'{"a":[1,2],"b":null}'


def test_encode_json_body__unicode_not_escaped():
    assert encode_json_body({"k": "ü"}) == '{"k":"ü"}'.encode("utf-8")


def test_encode_json_body__keeps_order():
    assert encode_json_body({"z": 1, "a": 2}) == b'{"z":1,"a":2}'


def test_encode_json_body__nan():
    with pytest.raises(ValueError):
        encode_json_body({"a": float("nan")})


def test_encode_json_body__lone_surrogate():
    with pytest.raises(UnicodeEncodeError):
        encode_json_body({"a": "\udc00"})


def test_encoder__decimal():
    assert json.dumps(Decimal("1.10"), cls=RequestKitJSONEncoder) == '"1.10"'


def test_encoder__decimal_infinity():
    with pytest.raises(ValueError):
        json.dumps(Decimal("Infinity"), cls=RequestKitJSONEncoder)


def test_encoder__datetime():
    value = datetime.datetime(2020, 10, 9, 12, 30, tzinfo=datetime.timezone.utc)

    assert json.dumps(value, cls=RequestKitJSONEncoder) == '"2020-10-09T12:30:00+00:00"'


def test_encoder__date():
    assert json.dumps(datetime.date(2020, 10, 9), cls=RequestKitJSONEncoder) == (
        '"2020-10-09"'
    )


def test_encoder__uuid():
    value = uuid.UUID("12345678-1234-5678-1234-567812345678")

    assert json.dumps(value, cls=RequestKitJSONEncoder) == (
        '"12345678-1234-5678-1234-567812345678"'
    )


def test_encoder__unknown_object():
    # No fallback to str()
    with pytest.raises(TypeError):
        json.dumps(object(), cls=RequestKitJSONEncoder)


def test_encode_json_body__non_string_key():
    with pytest.raises(TypeError):
        encode_json_body({1: "a"})  # type:ignore # testing types


def test_encode_json_body__nested_non_string_key():
    with pytest.raises(TypeError):
        encode_json_body({"a": [{"b": {None: 1}}]})  # type:ignore # testing types


def test_encode_json_body__tuple_values():
    assert encode_json_body({"a": (1, {"b": 2})}) == b'{"a":[1,{"b":2}]}'

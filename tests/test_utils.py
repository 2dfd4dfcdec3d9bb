import json
import string

import pytest

from pingdomkit.utils import rand_string, to_json_no_escape


def test_to_json_no_escape():
    obj = {
        "url": "https://foo.bar.com?name=a&value=b",
        "content": "<html>response body</html>",
    }
    assert to_json_no_escape(obj) == (
        '{"content":"<html>response body</html>","url":"https://foo.bar.com?name=a&value=b"}' + "\n"
    )


def test_to_json_no_escape_keeps_unicode_and_round_trips():
    obj = {"bar": {"name": "this is bar in foo"}, "é": [1, 2]}
    text = to_json_no_escape(obj)
    assert text == '{"bar":{"name":"this is bar in foo"},"é":[1,2]}\n'
    assert json.loads(text) == obj


def test_rand_string():
    size = 10
    for _ in range(5):
        a, b = rand_string(size), rand_string(size)
        assert len(a) == size
        assert len(b) == size
        assert a != b


def test_rand_string_alphabet():
    allowed = set(string.ascii_letters + string.digits)
    assert set(rand_string(200)) <= allowed


def test_rand_string_zero_and_negative():
    assert rand_string(0) == ""
    with pytest.raises(ValueError):
        rand_string(-1)
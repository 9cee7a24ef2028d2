import pytest

from models.schemas import ErrorKind
from validation.classifier import classify, has_disallowed_chars
from validation.tokenizer import tokenize


@pytest.mark.parametrize(
    "value, kind, key",
    [
        ("1.2.3.4-::1", ErrorKind.VERSION_MISMATCH, "version_mismatch"),
        # family mismatch outranks disallowed characters elsewhere in the list
        ("1.2.3.4-::1, zz", ErrorKind.VERSION_MISMATCH, "version_mismatch"),
        ("1.2.3.4-::g", ErrorKind.INVALID_CHARS, "invalid_chars"),
        ("10.0.0.9-10.0.0.1, x", ErrorKind.INVALID_CHARS, "invalid_chars"),
        ("10.0.0.9-10.0.0.1", ErrorKind.RANGE_ORDER, "range_order"),
        ("10.0.0.1-", ErrorKind.INVALID_FORMAT, "invalid_range"),
        ("10.0.0.1/24-5", ErrorKind.INVALID_FORMAT, "invalid_range"),
        ("10.0.0.1/", ErrorKind.INVALID_SUBNET, "invalid_subnet"),
        ("abc", ErrorKind.INVALID_FORMAT, "invalid_format"),
    ],
)
def test_priority_order(value, kind, key):
    result = classify(tokenize(value))

    assert result.kind == kind
    assert result.message_key == key


def test_disallowed_chars():
    assert not has_disallowed_chars("fe80::1/64, 10.0.0.1 - 10.0.0.2")
    assert has_disallowed_chars("10.0.0.1;")
    assert has_disallowed_chars("g")

from datetime import date

import pytest

from binmonitor.utils.validation import is_numeric, is_valid_email, parse_date, parse_positive_int


@pytest.mark.parametrize('raw, expected', [
    ('12', 12),
    (' 7 ', 7),
    ('+3', 3),
    ('0', None),
    ('-3', None),
    ('1.5', None),
    ('abc', None),
    ('2147483647', 2147483647),
    ('2147483648', None),
    ('99999999999999999999', None),
    ('0007', 7),
    ('', None),
    (None, None),
])
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw) == expected


@pytest.mark.parametrize('raw', ['42', '42.5', '-1', '+.5', '5.', '1e3', ' 7 ', '2.5E-2'])
def test_is_numeric_accepts(raw):
    assert is_numeric(raw)


@pytest.mark.parametrize('raw', ['N/A', '', 'abc', '1,5', 'nan', 'inf', '0x1A', '1e', '1e999', '-1e999', None])
def test_is_numeric_rejects(raw):
    assert not is_numeric(raw)


def test_is_valid_email():
    assert is_valid_email('ana@example.com')
    assert is_valid_email('first.last+tag@sub.example.org')
    assert not is_valid_email('not-an-email')
    assert not is_valid_email('ana@localhost')
    assert not is_valid_email('ana@@example.com')
    assert not is_valid_email('')


def test_parse_date():
    assert parse_date('2024-05-01') == date(2024, 5, 1)
    assert parse_date('') is None
    assert parse_date(None) is None
    with pytest.raises(ValueError):
        parse_date('2024-13-01')

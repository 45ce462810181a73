import pytest

from formatting import format_inr, format_rupees


@pytest.mark.parametrize("amount, expected", [
    (0, "0"),
    (999, "999"),
    (1000, "1,000"),
    (50000, "50,000"),
    (100000, "1,00,000"),
    (750000.0, "7,50,000"),
    (1234567, "12,34,567"),
    (10000000, "1,00,00,000"),
    (1499.5, "1,500"),
    (6448.16, "6,448"),
    (-150000, "-1,50,000"),
])
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_format_rupees_prefixes_symbol():
    assert format_rupees(25000) == "₹25,000"


def test_format_inr_beyond_default_decimal_precision():
    assert format_inr(1.5e28) == "15," + "00," * 12 + "000"
    assert format_inr(10 ** 30) == "10," + "00," * 13 + "000"

import pytest

from storefront.utils.currency import format_currency


@pytest.mark.parametrize("centimes, expected", [
    (0, "0,00 MAD"),
    (5, "0,05 MAD"),
    (39900, "399,00 MAD"),
    (150000, "1 500,00 MAD"),
    (123456789, "1 234 567,89 MAD"),
    (-2500, "-25,00 MAD"),
])
def test_format_currency(centimes, expected):
    assert format_currency(centimes) == expected

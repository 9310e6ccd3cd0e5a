import pytest

from services.booking.domain.value_object import Quantity
from services.booking.domain.value_object.quantity import MAX_QUANTITY
from services.shared.domain.exception import InvalidQuantityException


class TestQuantity:
    def test_valid_quantity(self):
        quantity = Quantity(value=2, label="guests")
        assert quantity.value == 2
        assert int(quantity) == 2
        assert str(quantity) == "2"

    @pytest.mark.parametrize("value", [0, -1, True])
    def test_invalid_value_raises_error(self, value):
        with pytest.raises(InvalidQuantityException):
            Quantity(value=value, label="guests")

    def test_label_is_not_part_of_equality(self):
        assert Quantity(value=1, label="guests") == Quantity(value=1, label="rooms")


class TestQuantityParse:
    @pytest.mark.parametrize(("raw", "expected"), [(3, 3), ("3", 3), (" 2 ", 2)])
    def test_parses_ints_and_digit_strings(self, raw, expected):
        assert Quantity.parse(raw, "rooms").value == expected

    @pytest.mark.parametrize("raw", ["0", "-1", "", "abc", "1.5", 1.5, None, False])
    def test_rejects_invalid_input(self, raw):
        with pytest.raises(
            InvalidQuantityException,
            match="Number of rooms must be a whole number of at least 1",
        ):
            Quantity.parse(raw, "rooms")


class TestQuantityUpperBound:
    def test_max_quantity_is_valid(self):
        assert Quantity(value=MAX_QUANTITY, label="rooms").value == MAX_QUANTITY

    def test_above_max_raises_error(self):
        with pytest.raises(InvalidQuantityException, match="cannot exceed 1000"):
            Quantity(value=MAX_QUANTITY + 1, label="rooms")

    @pytest.mark.parametrize("raw", ["1001", "1" + "0" * 40, "9" * 5000])
    def test_parse_rejects_huge_numbers(self, raw):
        with pytest.raises(InvalidQuantityException, match="cannot exceed"):
            Quantity.parse(raw, "rooms")

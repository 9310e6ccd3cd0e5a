from datetime import datetime, timedelta, timezone

import pytest

from services.booking.domain.service import StayDateValidator
from services.shared.domain.exception import InvalidRangeException


def _at(day: int, hour: int = 0, minute: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=timezone.utc)


class TestStayDateValidator:
    def test_check_out_after_check_in_is_valid(self):
        StayDateValidator().validate(_at(1), _at(2))

    def test_same_instant_raises_error(self):
        with pytest.raises(
            InvalidRangeException, match="Check-out date must be after check-in date"
        ):
            StayDateValidator().validate(_at(1), _at(1))

    def test_check_out_before_check_in_raises_error(self):
        with pytest.raises(InvalidRangeException):
            StayDateValidator().validate(_at(3), _at(1))

    @pytest.mark.parametrize(
        ("check_in", "check_out", "expected"),
        [
            (_at(1), _at(2), 1),
            (_at(1), _at(4), 3),
            (_at(1), _at(2, 1), 2),  # 25時間 → 2泊
            (_at(1), _at(1, 0, 1), 1),  # 1分でも1泊
            (_at(1, 14), _at(4, 10), 3),
        ],
    )
    def test_nights_rounds_partial_days_up(self, check_in, check_out, expected):
        assert StayDateValidator().nights(check_in, check_out) == expected

    def test_nights_with_one_millisecond_over_a_day(self):
        check_in = _at(1)
        check_out = check_in + timedelta(days=1, milliseconds=1)
        assert StayDateValidator().nights(check_in, check_out) == 2

    def test_nights_rejects_invalid_range(self):
        with pytest.raises(InvalidRangeException):
            StayDateValidator().nights(_at(2), _at(1))


class TestAdjustCheckOut:
    def test_moves_check_out_to_next_day_when_not_after_check_in(self):
        """チェックインをチェックアウト以降に動かしたら翌日にずらす"""
        adjusted = StayDateValidator().adjust_check_out(_at(5, 14), _at(3, 10))
        assert adjusted == _at(6, 14)

    def test_equal_dates_are_adjusted(self):
        adjusted = StayDateValidator().adjust_check_out(_at(5), _at(5))
        assert adjusted == _at(6)

    def test_valid_check_out_is_kept(self):
        adjusted = StayDateValidator().adjust_check_out(_at(1), _at(3))
        assert adjusted == _at(3)

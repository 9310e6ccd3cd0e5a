from __future__ import annotations

from dataclasses import dataclass

from services.booking.domain.service.stay_date_validator import StayDateValidator
from services.shared.domain.value_object.iso_date_time import IsoDateTime


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日時 + チェックアウト日時)"""

    check_in: IsoDateTime
    check_out: IsoDateTime

    def __post_init__(self) -> None:
        StayDateValidator().validate(self.check_in.value, self.check_out.value)

    @classmethod
    def from_strings(cls, check_in: str, check_out: str) -> StayPeriod:
        """ISO 8601 形式の文字列から生成する"""
        try:
            check_in_at = IsoDateTime.from_string(check_in)
            check_out_at = IsoDateTime.from_string(check_out)
        except ValueError as e:
            raise ValueError(f"Invalid date format: {e}") from e
        return cls(check_in=check_in_at, check_out=check_out_at)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return StayDateValidator().nights(self.check_in.value, self.check_out.value)

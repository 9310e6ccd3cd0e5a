from __future__ import annotations

from typing import TYPE_CHECKING

from services.booking.domain.value_object.price_quote import PriceQuote
from services.shared.domain.exception import (
    InvalidQuantityException,
    InvalidRangeException,
)
from services.shared.domain.value_object.money import Money

if TYPE_CHECKING:
    from services.booking.domain.value_object.stay_period import StayPeriod


class PriceCalculator:
    """料金計算（ドメインサービス）

    合計 = 泊数 × 1泊料金 × 部屋数。税・手数料・通貨換算は含まない。
    """

    def compute_total(self, nights: int, price_per_night: Money, rooms: int) -> Money:
        """合計金額を計算する"""
        if nights < 1:
            raise InvalidRangeException("Stay must be at least one night")
        if rooms < 1:
            raise InvalidQuantityException(
                "Number of rooms must be a whole number of at least 1"
            )
        return price_per_night.multiply(nights * rooms)

    def quote(
        self, stay_period: StayPeriod, price_per_night: Money, rooms: int
    ) -> PriceQuote:
        """見積もり（泊数・単価・部屋数・合計）を作成する"""
        nights = stay_period.nights()
        return PriceQuote(
            nights=nights,
            price_per_night=price_per_night,
            rooms=rooms,
            total=self.compute_total(nights, price_per_night, rooms),
        )

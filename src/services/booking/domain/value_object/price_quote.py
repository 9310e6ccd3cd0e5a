from dataclasses import dataclass

from services.shared.domain.value_object.money import Money


@dataclass(frozen=True)
class PriceQuote:
    """料金見積もり（予約確定前の内訳）"""

    nights: int
    price_per_night: Money
    rooms: int
    total: Money

from services.booking.domain.service import PriceCalculator
from services.booking.domain.value_object import Hotel, PriceQuote, Quantity, StayPeriod


class QuoteBookingService:
    """料金見積もりのユースケース（予約確定前のサマリー表示用）

    ストレージにも認証情報にも触れない。検証順は予約作成と同じ
    （人数 → 部屋数 → 日程）。
    """

    def __init__(self, calculator: PriceCalculator | None = None) -> None:
        self._calculator = calculator or PriceCalculator()

    def quote(
        self,
        hotel: Hotel,
        check_in: str,
        check_out: str,
        guests: object,
        rooms: object,
    ) -> PriceQuote:
        Quantity.parse(guests, "guests")
        room_count = Quantity.parse(rooms, "rooms")
        stay_period = StayPeriod.from_strings(check_in, check_out)
        return self._calculator.quote(stay_period, hotel.price, room_count.value)

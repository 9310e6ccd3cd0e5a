from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum.booking_status import BookingStatus
from services.booking.domain.service.price_calculator import PriceCalculator
from services.booking.domain.value_object.booking_id import BookingId
from services.booking.domain.value_object.hotel import Hotel
from services.booking.domain.value_object.hotel_snapshot import HotelSnapshot
from services.booking.domain.value_object.quantity import Quantity
from services.booking.domain.value_object.stay_period import StayPeriod
from services.shared.domain.value_object.iso_date_time import IsoDateTime


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def __init__(self, calculator: PriceCalculator | None = None) -> None:
        self._calculator = calculator or PriceCalculator()

    def create(
        self,
        hotel: Hotel,
        stay_period: StayPeriod,
        guests: Quantity,
        rooms: Quantity,
        created_at: IsoDateTime | None = None,
    ) -> Booking:
        """新規予約のエンティティを作成する（ステータスは CONFIRMED）"""
        created_at = created_at or IsoDateTime.now()
        snapshot = HotelSnapshot.from_hotel(hotel)
        quote = self._calculator.quote(
            stay_period, snapshot.price_per_night, rooms.value
        )

        return Booking(
            id=BookingId.from_created_at(created_at),
            hotel=snapshot,
            stay_period=stay_period,
            guests=guests,
            rooms=rooms,
            nights=quote.nights,
            total_cost=quote.total,
            created_at=created_at,
            status=BookingStatus.CONFIRMED,
        )

from services.booking.domain.enum.booking_status import BookingStatus
from services.booking.domain.service.price_calculator import PriceCalculator
from services.booking.domain.value_object.booking_id import BookingId
from services.booking.domain.value_object.hotel_snapshot import HotelSnapshot
from services.booking.domain.value_object.quantity import Quantity
from services.booking.domain.value_object.stay_period import StayPeriod
from services.shared.domain import Entity, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(Entity[BookingId]):
    """ホテル予約エンティティ

    作成時点のホテル情報と料金をスナップショットとして保持する。
    作成後に変更する操作は持たない（キャンセルは一覧からの削除）。
    """

    def __init__(
        self,
        id: BookingId,
        hotel: HotelSnapshot,
        stay_period: StayPeriod,
        guests: Quantity,
        rooms: Quantity,
        nights: int,
        total_cost: Money,
        created_at: IsoDateTime,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> None:
        super().__init__(id)
        self._hotel = hotel
        self._stay_period = stay_period
        self._guests = guests
        self._rooms = rooms
        self._nights = nights
        self._total_cost = total_cost
        self._created_at = created_at
        self._status = status

        # ドメイン不変条件の検証
        self._validate_price()

    def _validate_price(self) -> None:
        """泊数・合計金額が滞在期間と単価から導かれる値と一致すること"""
        if self._nights != self._stay_period.nights():
            raise BusinessRuleViolationException(
                f"Nights ({self._nights}) do not match the stay period"
            )
        expected = PriceCalculator().compute_total(
            self._nights, self._hotel.price_per_night, self._rooms.value
        )
        if expected != self._total_cost:
            raise BusinessRuleViolationException(
                f"Total cost {self._total_cost} does not match "
                f"nights x price per night x rooms ({expected})"
            )

    @property
    def hotel(self) -> HotelSnapshot:
        return self._hotel

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guests(self) -> Quantity:
        return self._guests

    @property
    def rooms(self) -> Quantity:
        return self._rooms

    @property
    def nights(self) -> int:
        return self._nights

    @property
    def price_per_night(self) -> Money:
        return self._hotel.price_per_night

    @property
    def total_cost(self) -> Money:
        return self._total_cost

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    def is_cancellable(self) -> bool:
        """キャンセル可能か（確定済みの予約のみ）"""
        return self._status == BookingStatus.CONFIRMED

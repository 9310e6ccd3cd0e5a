from dataclasses import dataclass

from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain.value_object.account_id import AccountId


@dataclass(frozen=True)
class BookingAppended:
    """予約が一覧に追加された"""

    account_id: AccountId
    booking_id: BookingId
    hotel_id: str


@dataclass(frozen=True)
class BookingRemoved:
    """予約が一覧から削除された（キャンセル）"""

    account_id: AccountId
    booking_id: BookingId
    index: int

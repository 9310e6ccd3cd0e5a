from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    作成時は常に CONFIRMED。キャンセルは一覧からの削除で表すため
    CANCELLED へ遷移することはない。
    """

    CONFIRMED = "Confirmed"
    PENDING = "Pending"
    CANCELLED = "Cancelled"

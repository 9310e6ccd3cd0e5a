from __future__ import annotations

from collections.abc import Iterable

from services.booking.domain.entity.booking import Booking
from services.booking.domain.event.booking_events import (
    BookingAppended,
    BookingRemoved,
)
from services.shared.domain import AccountId, AggregateRoot
from services.shared.domain.exception import IndexOutOfRangeException


class BookingLedger(AggregateRoot[AccountId]):
    """予約一覧（アカウント単位の集約）

    - 1アカウントにつき1つ。他アカウントとは共有しない
    - 変更は append（作成）と remove_at（キャンセル）のみ
    - 並び順は追加順。新しい順の表示は読み出し時に並べ替える
    - version は読み込み時点の版で、保存時の競合検出に使う
    """

    def __init__(
        self,
        id: AccountId,
        bookings: Iterable[Booking] = (),
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        self._bookings = list(bookings)

    @property
    def account_id(self) -> AccountId:
        return self.id

    @property
    def bookings(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)

    def __len__(self) -> int:
        return len(self._bookings)

    def append(self, booking: Booking) -> None:
        """予約を末尾に追加する"""
        self._bookings.append(booking)
        self.add_domain_event(
            BookingAppended(
                account_id=self.account_id,
                booking_id=booking.id,
                hotel_id=booking.hotel.hotel_id,
            )
        )

    def booking_at(self, index: int) -> Booking:
        """指定位置の予約を返す"""
        self._check_index(index)
        return self._bookings[index]

    def remove_at(self, index: int) -> Booking:
        """指定位置の予約を削除し、後続を詰める"""
        self._check_index(index)
        removed = self._bookings.pop(index)
        self.add_domain_event(
            BookingRemoved(
                account_id=self.account_id,
                booking_id=removed.id,
                index=index,
            )
        )
        return removed

    def list(self, newest_first: bool = False) -> list[Booking]:
        """予約の一覧（既定は追加順）"""
        return [booking for _, booking in self.entries(newest_first)]

    def entries(self, newest_first: bool = False) -> list[tuple[int, Booking]]:
        """一覧上の位置と予約の組

        新しい順に並べても、位置は保存順のまま（キャンセル時の指定に使う）。
        """
        entries = list(enumerate(self._bookings))
        if newest_first:
            entries.sort(key=lambda entry: entry[1].created_at.value, reverse=True)
        return entries

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._bookings):
            raise IndexOutOfRangeException(
                f"Booking index {index} is out of range "
                f"(ledger has {len(self._bookings)} bookings)"
            )

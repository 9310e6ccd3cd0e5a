from abc import ABC, abstractmethod

from services.booking.domain.entity.booking_ledger import BookingLedger
from services.shared.domain import AccountId


class BookingLedgerRepository(ABC):
    """予約一覧レポジトリのインターフェース

    プロフィール単位で一覧全体を読み込み、一覧全体を書き戻す。
    """

    @abstractmethod
    def save(self, ledger: BookingLedger) -> None:
        """予約一覧を書き戻す

        読み込み後に他から更新されていた場合は OptimisticLockException。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, account_id: AccountId) -> BookingLedger | None:
        """アカウントIDで検索する（プロフィールが無ければ None）"""
        raise NotImplementedError

from services.booking.applications.quote_booking import QuoteBookingService
from services.booking.domain.entity import Booking, BookingLedger
from services.booking.domain.event import BookingAppended, BookingRemoved
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingLedgerRepository
from services.booking.domain.service import PriceCalculator
from services.booking.domain.value_object import Hotel, PriceQuote, Quantity, StayPeriod
from services.shared.domain import AccountId
from services.shared.domain.exception import (
    AccountNotFoundException,
    BusinessRuleViolationException,
    UnauthenticatedException,
)
from services.shared.utils import get_logger

logger = get_logger("booking-service")


class ReservationService:
    """予約のユースケース（作成・キャンセル・一覧・見積もり）

    作成・キャンセルはいずれも「一覧の読み込み → 集約の変更 → 一覧の書き戻し」。
    検証はすべて書き込み前に行い、失敗時にストレージの状態は変わらない。
    リトライはしない（呼び出し側で再実行する）。
    """

    def __init__(
        self,
        repository: BookingLedgerRepository,
        factory: BookingFactory,
        calculator: PriceCalculator | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._quotes = QuoteBookingService(calculator)

    def quote(
        self,
        hotel: Hotel,
        check_in: str,
        check_out: str,
        guests: object,
        rooms: object,
    ) -> PriceQuote:
        """予約確定前の料金見積もりを返す（保存はしない）"""
        return self._quotes.quote(hotel, check_in, check_out, guests, rooms)

    def create_booking(
        self,
        account_id: AccountId | None,
        hotel: Hotel,
        check_in: str,
        check_out: str,
        guests: object,
        rooms: object,
    ) -> Booking:
        """ホテルを予約する

        検証順: 認証 → 人数・部屋数 → 日程。
        """
        # 1. 認証済みアカウントが必要
        account_id = self._require_account(account_id)

        # 2. 人数・部屋数、3. 日程
        guest_count, room_count = self._parse_quantities(guests, rooms)
        stay_period = StayPeriod.from_strings(check_in, check_out)

        # 4. 泊数・合計を計算して確定済みのスナップショットを作る
        booking = self._factory.create(hotel, stay_period, guest_count, room_count)

        # 5. 一覧に追加して書き戻す
        ledger = self._load_ledger(account_id)
        ledger.append(booking)
        self._repository.save(ledger)
        self._log_events(ledger)

        return booking

    def cancel_booking(self, account_id: AccountId | None, index: int) -> Booking:
        """予約をキャンセルする（一覧から削除する）

        Returns:
            Booking: 削除した予約
        """
        account_id = self._require_account(account_id)
        ledger = self._load_ledger(account_id)

        booking = ledger.booking_at(index)
        if not booking.is_cancellable():
            raise BusinessRuleViolationException(
                f"Only confirmed bookings can be cancelled: "
                f"status={booking.status.value}"
            )

        removed = ledger.remove_at(index)
        self._repository.save(ledger)
        self._log_events(ledger)

        return removed

    def list_bookings(
        self, account_id: AccountId | None, newest_first: bool = True
    ) -> list[tuple[int, Booking]]:
        """予約一覧を返す（位置は保存順のまま）"""
        account_id = self._require_account(account_id)
        ledger = self._load_ledger(account_id)
        return ledger.entries(newest_first=newest_first)

    def _require_account(self, account_id: AccountId | None) -> AccountId:
        if account_id is None:
            raise UnauthenticatedException("Please sign in to make a booking")
        return account_id

    def _parse_quantities(
        self, guests: object, rooms: object
    ) -> tuple[Quantity, Quantity]:
        return Quantity.parse(guests, "guests"), Quantity.parse(rooms, "rooms")

    def _load_ledger(self, account_id: AccountId) -> BookingLedger:
        ledger = self._repository.find_by_id(account_id)
        if ledger is None:
            raise AccountNotFoundException(f"User profile not found: {account_id}")
        return ledger

    def _log_events(self, ledger: BookingLedger) -> None:
        for event in ledger.flush_domain_events():
            if isinstance(event, (BookingAppended, BookingRemoved)):
                logger.info(
                    "Booking ledger updated",
                    extra={
                        "event": type(event).__name__,
                        "account_id": str(event.account_id),
                        "booking_id": str(event.booking_id),
                    },
                )

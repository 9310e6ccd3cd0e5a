import pytest

from services.booking.domain.event import BookingAppended, BookingRemoved
from services.shared.domain.exception import IndexOutOfRangeException


class TestBookingLedger:
    def test_append_keeps_insertion_order(self, create_ledger, create_booking):
        ledger = create_ledger()
        first = create_booking(booking_id="1")
        second = create_booking(booking_id="2")

        ledger.append(first)
        ledger.append(second)

        assert ledger.bookings == (first, second)
        assert len(ledger) == 2

    def test_append_records_event(self, create_ledger, create_booking, account_id):
        ledger = create_ledger()
        booking = create_booking(booking_id="1")

        ledger.append(booking)

        events = ledger.flush_domain_events()
        assert events == [
            BookingAppended(
                account_id=account_id, booking_id=booking.id, hotel_id="hotel-1"
            )
        ]
        assert ledger.flush_domain_events() == []

    def test_remove_at_shifts_following_bookings(self, create_ledger, create_booking):
        # Arrange
        bookings = [create_booking(booking_id=str(i)) for i in range(3)]
        ledger = create_ledger(bookings)

        # Act
        removed = ledger.remove_at(1)

        # Assert
        assert removed == bookings[1]
        assert ledger.bookings == (bookings[0], bookings[2])
        assert ledger.booking_at(1) == bookings[2]
        assert isinstance(ledger.flush_domain_events()[0], BookingRemoved)

    @pytest.mark.parametrize("index", [-1, 2, 5])
    def test_remove_at_out_of_range_raises_error(
        self, create_ledger, create_booking, index
    ):
        bookings = [create_booking(booking_id="1"), create_booking(booking_id="2")]
        ledger = create_ledger(bookings)

        with pytest.raises(IndexOutOfRangeException):
            ledger.remove_at(index)

        assert ledger.bookings == tuple(bookings)
        assert ledger.flush_domain_events() == []

    def test_booking_at_on_empty_ledger_raises_error(self, create_ledger):
        with pytest.raises(IndexOutOfRangeException):
            create_ledger().booking_at(0)

    def test_entries_newest_first_keep_storage_indices(
        self, create_ledger, create_booking
    ):
        older = create_booking(booking_id="1", created_at="2024-01-01T00:00:00.000Z")
        newest = create_booking(booking_id="2", created_at="2024-03-01T00:00:00.000Z")
        middle = create_booking(booking_id="3", created_at="2024-02-01T00:00:00.000Z")
        ledger = create_ledger([older, newest, middle])

        entries = ledger.entries(newest_first=True)

        assert entries == [(1, newest), (2, middle), (0, older)]
        assert ledger.list(newest_first=True) == [newest, middle, older]
        assert ledger.list() == [older, newest, middle]

    def test_listing_does_not_reorder_storage(self, create_ledger, create_booking):
        older = create_booking(booking_id="1", created_at="2024-01-01T00:00:00.000Z")
        newer = create_booking(booking_id="2", created_at="2024-02-01T00:00:00.000Z")
        ledger = create_ledger([older, newer])

        ledger.list(newest_first=True)

        assert ledger.booking_at(0) == older

    def test_increment_version(self, create_ledger):
        ledger = create_ledger(version=3)
        ledger.increment_version()
        assert ledger.version == 4

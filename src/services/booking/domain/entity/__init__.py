from .booking import Booking
from .booking_ledger import BookingLedger

__all__ = ["Booking", "BookingLedger"]

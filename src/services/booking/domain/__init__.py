from .value_object import (
    BookingId,
    Hotel,
    HotelSnapshot,
    PriceQuote,
    Quantity,
    StayPeriod,
)
from .enum import BookingStatus
from .service import PriceCalculator, StayDateValidator
from .event import BookingAppended, BookingRemoved
from .entity import Booking, BookingLedger
from .factory import BookingFactory
from .repository import BookingLedgerRepository

__all__ = [
    "Booking",
    "BookingAppended",
    "BookingFactory",
    "BookingId",
    "BookingLedger",
    "BookingLedgerRepository",
    "BookingRemoved",
    "BookingStatus",
    "Hotel",
    "HotelSnapshot",
    "PriceCalculator",
    "PriceQuote",
    "Quantity",
    "StayDateValidator",
    "StayPeriod",
]

from .booking_id import BookingId
from .hotel import Hotel
from .hotel_snapshot import HotelSnapshot
from .price_quote import PriceQuote
from .quantity import Quantity
from .stay_period import StayPeriod

__all__ = [
    "BookingId",
    "Hotel",
    "HotelSnapshot",
    "PriceQuote",
    "Quantity",
    "StayPeriod",
]

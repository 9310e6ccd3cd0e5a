from .booking_events import BookingAppended, BookingRemoved

__all__ = ["BookingAppended", "BookingRemoved"]

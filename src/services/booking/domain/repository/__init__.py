from .booking_ledger_repository import BookingLedgerRepository

__all__ = ["BookingLedgerRepository"]

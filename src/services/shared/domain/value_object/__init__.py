from .account_id import AccountId
from .currency import Currency
from .iso_date_time import IsoDateTime
from .money import Money

__all__ = ["AccountId", "Currency", "Money", "IsoDateTime"]

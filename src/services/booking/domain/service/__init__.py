from .price_calculator import PriceCalculator
from .stay_date_validator import StayDateValidator

__all__ = ["PriceCalculator", "StayDateValidator"]

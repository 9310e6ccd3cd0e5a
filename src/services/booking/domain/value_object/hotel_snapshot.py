from __future__ import annotations

from dataclasses import dataclass

from services.booking.domain.value_object.hotel import Hotel
from services.shared.domain.value_object.money import Money

MAX_HOTEL_NAME_LENGTH = 100


@dataclass(frozen=True)
class HotelSnapshot:
    """予約作成時点のホテル情報の写し

    後からホテル情報が変わっても過去の予約には影響しない。
    """

    hotel_id: str
    hotel_name: str
    price_per_night: Money
    hotel_image: str | None = None

    def __post_init__(self) -> None:
        if not self.hotel_id or not self.hotel_id.strip():
            raise ValueError("Hotel id cannot be empty")
        if not self.hotel_name or not self.hotel_name.strip():
            raise ValueError("Hotel name cannot be empty")
        if len(self.hotel_name) > MAX_HOTEL_NAME_LENGTH:
            raise ValueError(
                f"Hotel name is too long (max {MAX_HOTEL_NAME_LENGTH} characters)"
            )

    @classmethod
    def from_hotel(cls, hotel: Hotel) -> HotelSnapshot:
        """ホテルの現在の値から生成する"""
        return cls(
            hotel_id=hotel.id,
            hotel_name=hotel.name,
            price_per_night=hotel.price,
            hotel_image=hotel.image,
        )

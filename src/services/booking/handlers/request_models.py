from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.booking.domain.value_object import Hotel
from services.shared.domain import Currency, Money
from services.shared.utils import to_decimal


class HotelRequest(BaseModel):
    """ホテル情報のリクエストモデル（カタログ・セール情報の1件）"""

    id: str = Field(..., min_length=1, description="ホテルID")
    name: str = Field(..., min_length=1, max_length=100, description="ホテル名")
    location: str = Field(default="", description="所在地")
    price: Decimal = Field(..., gt=0, description="1泊あたりの料金")
    price_currency: str = Field(
        default="ZAR",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )
    rating: Decimal | None = Field(default=None, ge=0, le=5, description="評価")
    image: str | None = Field(default=None, description="画像URL")
    amenities: list[str] = Field(default_factory=list, description="設備")
    description: str = Field(default="", description="説明")

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)

    def to_hotel(self) -> Hotel:
        """ドメインの Hotel に変換する"""
        return Hotel(
            id=self.id,
            name=self.name,
            price=Money(amount=self.price, currency=Currency(self.price_currency)),
            location=self.location,
            rating=self.rating,
            image=self.image,
            amenities=tuple(self.amenities),
            description=self.description,
        )


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル

    guests / rooms は画面の入力値をそのまま受け取り、ドメイン側で検証する。
    """

    hotel: HotelRequest
    check_in: str = Field(
        ...,
        min_length=1,
        description="チェックイン日時（ISO 8601）",
        examples=["2024-01-01T00:00:00.000Z"],
    )
    check_out: str = Field(
        ...,
        min_length=1,
        description="チェックアウト日時（ISO 8601）",
        examples=["2024-01-04T00:00:00.000Z"],
    )
    guests: int | str = Field(default="1", description="宿泊人数")
    rooms: int | str = Field(default="1", description="部屋数")


class QuoteRequest(CreateBookingRequest):
    """料金見積もりリクエストモデル"""

    pass

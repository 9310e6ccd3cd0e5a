from dataclasses import dataclass
from decimal import Decimal

from services.shared.domain.value_object.money import Money


@dataclass(frozen=True)
class Hotel:
    """ホテル（カタログ・セール情報から渡される参照データ）

    予約処理の間は不変。予約には HotelSnapshot として写し取る。
    """

    id: str
    name: str
    price: Money
    location: str = ""
    rating: Decimal | None = None
    image: str | None = None
    amenities: tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Hotel id cannot be empty")

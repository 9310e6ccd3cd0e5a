from __future__ import annotations

import uuid
from dataclasses import dataclass

from services.shared.domain.value_object.iso_date_time import IsoDateTime


@dataclass(frozen=True)
class BookingId:
    """予約ID（<作成日時のエポックミリ秒>-<ランダム6桁の16進数>）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_created_at(cls, created_at: IsoDateTime) -> BookingId:
        """作成日時から生成する

        同じミリ秒に作成された予約も区別できるよう接尾辞を付ける。
        """
        return cls(value=f"{created_at.epoch_millis()}-{uuid.uuid4().hex[:6]}")

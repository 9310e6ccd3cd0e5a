from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーン無しの入力は UTC とみなす。精度はミリ秒。
    """

    value: datetime

    def __post_init__(self) -> None:
        value = self.value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        value = value.replace(microsecond=value.microsecond // 1000 * 1000)
        object.__setattr__(self, "value", value)

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def now(cls) -> IsoDateTime:
        """現在日時"""
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def epoch_millis(self) -> int:
        """UNIX エポックからのミリ秒"""
        return (self.value - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(
            milliseconds=1
        )

    def plus_days(self, days: int) -> IsoDateTime:
        """指定日数後の日時"""
        return IsoDateTime(value=self.value + timedelta(days=days))

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value

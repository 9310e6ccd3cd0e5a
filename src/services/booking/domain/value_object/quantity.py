from __future__ import annotations

import re
from dataclasses import dataclass, field

from services.shared.domain.exception import InvalidQuantityException

MAX_QUANTITY = 1000

# 上限を超える桁数は int() に渡す前に弾く
_DIGITS = re.compile(r"[+-]?\d{1,12}", re.ASCII)
_LONG_DIGITS = re.compile(r"\+?\d{13,}", re.ASCII)


@dataclass(frozen=True)
class Quantity:
    """宿泊人数・部屋数（1 以上 MAX_QUANTITY 以下の整数）"""

    value: int
    label: str = field(default="items", compare=False)

    def __post_init__(self) -> None:
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or self.value < 1
        ):
            raise InvalidQuantityException(
                f"Number of {self.label} must be a whole number of at least 1"
            )
        if self.value > MAX_QUANTITY:
            raise InvalidQuantityException(
                f"Number of {self.label} cannot exceed {MAX_QUANTITY}"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def parse(cls, raw: object, label: str) -> Quantity:
        """入力値（int または数字の文字列）から生成する

        小数・空文字・真偽値は受け付けない。
        """
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cls(value=raw, label=label)
        if isinstance(raw, str) and _DIGITS.fullmatch(raw.strip()):
            return cls(value=int(raw.strip()), label=label)
        if isinstance(raw, str) and _LONG_DIGITS.fullmatch(raw.strip()):
            raise InvalidQuantityException(
                f"Number of {label} cannot exceed {MAX_QUANTITY}"
            )
        raise InvalidQuantityException(
            f"Number of {label} must be a whole number of at least 1"
        )

from dataclasses import dataclass
from typing import ClassVar

from services.shared.domain.exception import InvalidInputException


@dataclass(frozen=True)
class Rating:
    """評価（1〜5 の整数）"""

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 5

    value: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.value, bool)
            or not isinstance(self.value, int)
            or not self.MIN <= self.value <= self.MAX
        ):
            raise InvalidInputException(
                f"Rating must be an integer between {self.MIN} and {self.MAX}"
            )

    def __int__(self) -> int:
        return self.value

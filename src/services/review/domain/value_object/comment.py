from dataclasses import dataclass

from services.shared.domain.exception import InvalidInputException


@dataclass(frozen=True)
class Comment:
    """レビュー本文（前後の空白を除いて空でないこと）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidInputException("Review comment cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountId:
    """アカウントID（認証基盤が払い出す不変の識別子）

    予約一覧の所有者キーとして使う。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("AccountId cannot be empty")

    def __str__(self) -> str:
        return self.value

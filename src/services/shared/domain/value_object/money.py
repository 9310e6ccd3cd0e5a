from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    Decimal で保持し、乗算・加算で丸め誤差を出さない。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.currency.symbol}{self.amount}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> Money:
        """金額を整数倍する"""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(amount=self.amount * factor, currency=self.currency)

    @classmethod
    def zar(cls, amount: Decimal | int | str) -> Money:
        """ランドで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.zar())

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    料金はすべて南アフリカ・ランド建て。多通貨には対応しない。
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"ZAR"})
    SYMBOLS: ClassVar[dict[str, str]] = {"ZAR": "R"}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        """表示用の通貨記号"""
        return self.SYMBOLS[self.code]

    @classmethod
    def zar(cls) -> Currency:
        """南アフリカ・ランド"""
        return cls("ZAR")

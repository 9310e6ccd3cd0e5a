from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class ReviewId:
    """レビューID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReviewId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReviewId:
        """新しいレビューIDを払い出す"""
        return cls(value=uuid.uuid4().hex)

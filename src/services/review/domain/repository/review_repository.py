from abc import ABC, abstractmethod

from services.review.domain.entity import Review


class ReviewRepository(ABC):
    """レビューレポジトリのインターフェース"""

    @abstractmethod
    def save(self, review: Review) -> None:
        """レビューをホテルの一覧の先頭に追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_hotel_id(self, hotel_id: str) -> list[Review]:
        """ホテルのレビューを新しい順に返す"""
        raise NotImplementedError

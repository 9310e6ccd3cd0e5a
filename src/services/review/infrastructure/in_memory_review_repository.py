from datetime import date
from typing import NamedTuple

from services.review.domain.entity import Review
from services.review.domain.repository import ReviewRepository
from services.review.domain.value_object import Comment, Rating, ReviewId


class SeedReview(NamedTuple):
    """初期表示用のレビュー"""

    id: str
    author: str
    rating: int
    comment: str
    created_at: date


SAMPLE_REVIEWS: tuple[SeedReview, ...] = (
    SeedReview(
        id="1",
        author="John Smith",
        rating=5,
        comment=(
            "Absolutely amazing experience! The staff was incredibly friendly "
            "and the views were breathtaking."
        ),
        created_at=date(2024, 10, 15),
    ),
    SeedReview(
        id="2",
        author="Sarah Johnson",
        rating=4,
        comment="Great hotel with excellent amenities. The spa was wonderful!",
        created_at=date(2024, 10, 10),
    ),
)


class InMemoryReviewRepository(ReviewRepository):
    """メモリ上の ReviewRepository 実装

    実行環境ごとのセッション内でのみ保持する。各ホテルの一覧はサンプルレビューから
    始まる。保持するのは一度でもレビューが追加されたホテルだけ。
    """

    def __init__(self, seed: tuple[SeedReview, ...] = SAMPLE_REVIEWS) -> None:
        self._seed = seed
        self._reviews: dict[str, list[Review]] = {}

    def save(self, review: Review) -> None:
        """レビューをホテルの一覧の先頭に追加する"""
        if review.hotel_id not in self._reviews:
            self._reviews[review.hotel_id] = self._seeded(review.hotel_id)
        self._reviews[review.hotel_id].insert(0, review)

    def find_by_hotel_id(self, hotel_id: str) -> list[Review]:
        """ホテルのレビューを新しい順に返す"""
        if hotel_id in self._reviews:
            return list(self._reviews[hotel_id])
        return self._seeded(hotel_id)

    def _seeded(self, hotel_id: str) -> list[Review]:
        return [
            Review(
                id=ReviewId(value=f"{hotel_id}-{seed.id}"),
                hotel_id=hotel_id,
                author=seed.author,
                rating=Rating(seed.rating),
                comment=Comment(seed.comment),
                created_at=seed.created_at,
            )
            for seed in self._seed
        ]

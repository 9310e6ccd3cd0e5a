from services.review.domain.entity import Review
from services.review.domain.repository import ReviewRepository
from services.review.domain.value_object import Comment, Rating, ReviewId
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import InvalidInputException
from services.shared.utils import get_logger

logger = get_logger("review-service")

DEFAULT_AUTHOR = "Current User"


class ReviewAggregator:
    """ホテルごとのレビュー一覧のユースケース

    追加は一覧の先頭（新しい順）。削除・編集はしない。
    """

    def __init__(self, repository: ReviewRepository) -> None:
        self._repository = repository

    def add_review(
        self,
        hotel_id: str,
        rating: int,
        comment: str,
        author: str = DEFAULT_AUTHOR,
    ) -> Review:
        """レビューを追加する"""
        if not hotel_id or not hotel_id.strip():
            raise InvalidInputException("Hotel id cannot be empty")

        review = Review(
            id=ReviewId.generate(),
            hotel_id=hotel_id,
            author=author or DEFAULT_AUTHOR,
            rating=Rating(rating),
            comment=Comment(comment),
            created_at=IsoDateTime.now().value.date(),
        )
        self._repository.save(review)

        logger.info(
            "Review added",
            extra={"hotel_id": hotel_id, "review_id": str(review.id)},
        )
        return review

    def list_reviews(self, hotel_id: str) -> tuple[Review, ...]:
        """ホテルのレビューを新しい順に返す（読み取りのみ）"""
        return tuple(self._repository.find_by_hotel_id(hotel_id))

from datetime import date

from services.review.domain.value_object import Comment, Rating, ReviewId
from services.shared.domain import Entity


class Review(Entity[ReviewId]):
    """レビューエンティティ（1件のレビューは1つのホテルに属する）"""

    def __init__(
        self,
        id: ReviewId,
        hotel_id: str,
        author: str,
        rating: Rating,
        comment: Comment,
        created_at: date,
    ) -> None:
        super().__init__(id)
        self._hotel_id = hotel_id
        self._author = author
        self._rating = rating
        self._comment = comment
        self._created_at = created_at

    @property
    def hotel_id(self) -> str:
        return self._hotel_id

    @property
    def author(self) -> str:
        return self._author

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def comment(self) -> Comment:
        return self._comment

    @property
    def created_at(self) -> date:
        return self._created_at

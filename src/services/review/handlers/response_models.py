from pydantic import BaseModel

from services.review.domain.entity import Review


class ReviewData(BaseModel):
    """レビューデータのレスポンスモデル"""

    review_id: str
    hotel_id: str
    author: str
    rating: int
    comment: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReviewData


class ReviewListData(BaseModel):
    """レビュー一覧データのレスポンスモデル"""

    reviews: list[ReviewData]
    count: int


class ReviewListResponse(BaseModel):
    """レビュー一覧レスポンスモデル"""

    status: str = "success"
    data: ReviewListData


def to_review_data(review: Review) -> ReviewData:
    """Review エンティティをレスポンスデータに変換する"""
    return ReviewData(
        review_id=str(review.id),
        hotel_id=review.hotel_id,
        author=review.author,
        rating=review.rating.value,
        comment=str(review.comment),
        created_at=review.created_at.isoformat(),
    )


def to_response(review: Review) -> dict:
    return SuccessResponse(data=to_review_data(review)).model_dump()


def to_list_response(reviews: tuple[Review, ...]) -> dict:
    items = [to_review_data(review) for review in reviews]
    return ReviewListResponse(
        data=ReviewListData(reviews=items, count=len(items))
    ).model_dump()

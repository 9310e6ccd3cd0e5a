from pydantic import BaseModel, Field


class AddReviewRequest(BaseModel):
    """レビュー追加リクエストモデル

    評価の範囲・本文の空チェックはドメイン側で行う。
    """

    rating: int = Field(default=5, description="評価（1〜5）")
    comment: str = Field(..., description="本文")

from pydantic import BaseModel, Field


class UpdateProfileRequest(BaseModel):
    """プロフィール更新リクエストモデル

    空白だけの名前はドメイン側で弾く。
    """

    name: str = Field(..., max_length=100, description="表示名")

from pydantic import BaseModel

from services.account.domain.entity import Profile


class ProfileData(BaseModel):
    """プロフィールデータのレスポンスモデル"""

    account_id: str
    name: str
    email: str
    booking_count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ProfileData


def to_response(profile: Profile) -> dict:
    return SuccessResponse(
        data=ProfileData(
            account_id=str(profile.id),
            name=profile.name,
            email=profile.email,
            booking_count=profile.booking_count,
        )
    ).model_dump()

from services.account.domain.entity import Profile
from services.account.domain.repository import ProfileRepository
from services.shared.domain import AccountId
from services.shared.domain.exception import (
    AccountNotFoundException,
    UnauthenticatedException,
)
from services.shared.utils import get_logger

logger = get_logger("account-service")


class UpdateProfileNameService:
    """プロフィール名変更のユースケース

    名前は前後の空白を除いて空でないこと。予約一覧には触れない。
    """

    def __init__(self, repository: ProfileRepository) -> None:
        self._repository = repository

    def update(self, account_id: AccountId | None, name: str) -> Profile:
        """名前を変更し、変更後のプロフィールを返す"""
        if account_id is None:
            raise UnauthenticatedException("Please sign in to edit your profile")

        profile = self._repository.find_by_id(account_id)
        if profile is None:
            raise AccountNotFoundException(f"User profile not found: {account_id}")

        profile.rename(name)
        self._repository.update_name(profile)

        logger.info("Profile name updated", extra={"account_id": str(account_id)})
        return profile

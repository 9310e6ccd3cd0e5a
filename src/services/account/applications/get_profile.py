from services.account.domain.entity import Profile
from services.account.domain.repository import ProfileRepository
from services.shared.domain import AccountId
from services.shared.domain.exception import (
    AccountNotFoundException,
    UnauthenticatedException,
)


class GetProfileService:
    """プロフィール参照のユースケース（名前・メール・予約件数）"""

    def __init__(self, repository: ProfileRepository) -> None:
        self._repository = repository

    def get(self, account_id: AccountId | None) -> Profile:
        if account_id is None:
            raise UnauthenticatedException("Please sign in to view your profile")

        profile = self._repository.find_by_id(account_id)
        if profile is None:
            raise AccountNotFoundException(f"User profile not found: {account_id}")
        return profile

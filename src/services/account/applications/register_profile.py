from services.account.domain.entity import Profile
from services.account.domain.repository import ProfileRepository
from services.shared.domain import AccountId
from services.shared.domain.exception import DuplicateResourceException


class RegisterProfileService:
    """プロフィール登録のユースケース（サインアップ完了時）"""

    def __init__(self, repository: ProfileRepository) -> None:
        self._repository = repository

    def register(self, account_id: AccountId, name: str, email: str) -> Profile:
        """プロフィールを作成する

        トリガーの再実行に備え、既存のプロフィールがあればそれを返す。
        """
        existing = self._repository.find_by_id(account_id)
        if existing is not None:
            return existing

        profile = Profile(id=account_id, name=name, email=email)
        try:
            self._repository.save(profile)
        except DuplicateResourceException:
            return self._repository.find_by_id(account_id) or profile
        return profile

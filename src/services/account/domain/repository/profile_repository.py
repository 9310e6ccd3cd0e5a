from abc import ABC, abstractmethod

from services.account.domain.entity import Profile
from services.shared.domain import AccountId


class ProfileRepository(ABC):
    """プロフィールレポジトリのインターフェース"""

    @abstractmethod
    def save(self, profile: Profile) -> None:
        """空の予約一覧とともにプロフィールを作成する

        既に存在する場合は DuplicateResourceException。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, account_id: AccountId) -> Profile | None:
        """アカウントIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update_name(self, profile: Profile) -> None:
        """名前だけを書き換える（予約一覧と version には触れない）

        プロフィールが無い場合は AccountNotFoundException。
        """
        raise NotImplementedError

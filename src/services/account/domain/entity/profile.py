from services.shared.domain import AccountId, AggregateRoot
from services.shared.domain.exception import InvalidInputException

DEFAULT_PROFILE_NAME = "User"


class Profile(AggregateRoot[AccountId]):
    """プロフィールエンティティ

    予約一覧の格納先。サインアップ完了時に一度だけ作成される。
    名前は後からプロフィール画面で変更できる。
    """

    def __init__(
        self,
        id: AccountId,
        name: str,
        email: str,
        booking_count: int = 0,
    ) -> None:
        super().__init__(id)
        self._name = name.strip() if name and name.strip() else DEFAULT_PROFILE_NAME
        self._email = email
        self._booking_count = booking_count

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def booking_count(self) -> int:
        return self._booking_count

    def rename(self, name: str) -> None:
        """名前を変更する（前後の空白は除く）"""
        if not name or not name.strip():
            raise InvalidInputException("Name cannot be empty")
        self._name = name.strip()

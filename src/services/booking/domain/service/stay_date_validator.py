from datetime import datetime, timedelta

from services.shared.domain.exception import InvalidRangeException

ONE_DAY = timedelta(days=1)
_MICROSECONDS_PER_DAY = ONE_DAY // timedelta(microseconds=1)


class StayDateValidator:
    """滞在日程の検証（ドメインサービス）

    - チェックアウトはチェックインより後でなければならない
    - 泊数は経過時間を日単位で切り上げる（25時間 → 2泊）
    """

    def validate(self, check_in: datetime, check_out: datetime) -> None:
        """チェックイン・チェックアウトの前後関係を検証する"""
        if check_out <= check_in:
            raise InvalidRangeException("Check-out date must be after check-in date")

    def nights(self, check_in: datetime, check_out: datetime) -> int:
        """宿泊数（端数の日は切り上げ）"""
        self.validate(check_in, check_out)
        elapsed = (check_out - check_in) // timedelta(microseconds=1)
        return -(-elapsed // _MICROSECONDS_PER_DAY)

    def adjust_check_out(self, check_in: datetime, check_out: datetime) -> datetime:
        """チェックインをチェックアウト以降に動かしたとき、チェックアウトを翌日にずらす

        画面側の補助。確定時には validate で改めて検証する。
        """
        if check_out <= check_in:
            return check_in + ONE_DAY
        return check_out

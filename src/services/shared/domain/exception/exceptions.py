class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（バージョンが期待値と異なる場合）"""

    pass


class UnauthenticatedException(DomainException):
    """認証済みアカウントが存在しない場合"""

    pass


class AccountNotFoundException(ResourceNotFoundException):
    """アカウントのプロフィールが存在しない場合"""

    pass


class PersistenceException(DomainException):
    """ストレージへの読み書きに失敗した場合"""

    pass


class InvalidQuantityException(BusinessRuleViolationException):
    """宿泊人数・部屋数が 1 以上の整数でない場合"""

    pass


class InvalidRangeException(BusinessRuleViolationException):
    """チェックアウト日がチェックイン日より後でない場合"""

    pass


class IndexOutOfRangeException(BusinessRuleViolationException):
    """予約一覧の範囲外の位置が指定された場合"""

    pass


class InvalidInputException(BusinessRuleViolationException):
    """レビューの入力値が不正な場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass

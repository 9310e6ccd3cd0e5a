import json

from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    AccountNotFoundException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    IndexOutOfRangeException,
    InvalidInputException,
    InvalidQuantityException,
    InvalidRangeException,
    OptimisticLockException,
    PersistenceException,
    ResourceNotFoundException,
    UnauthenticatedException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


# 具体的な例外ほど先に評価する
_DOMAIN_ERRORS: list[tuple[type[DomainException], int, str]] = [
    (UnauthenticatedException, 401, "UNAUTHENTICATED"),
    (AccountNotFoundException, 404, "ACCOUNT_NOT_FOUND"),
    (IndexOutOfRangeException, 404, "INDEX_OUT_OF_RANGE"),
    (InvalidQuantityException, 400, "INVALID_QUANTITY"),
    (InvalidRangeException, 400, "INVALID_RANGE"),
    (InvalidInputException, 400, "INVALID_INPUT"),
    (OptimisticLockException, 409, "CONCURRENT_MODIFICATION"),
    (DuplicateResourceException, 409, "DUPLICATE_RESOURCE"),
    (PersistenceException, 503, "PERSISTENCE_ERROR"),
    (BusinessRuleViolationException, 422, "BUSINESS_RULE_VIOLATION"),
    (ResourceNotFoundException, 404, "NOT_FOUND"),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成する"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP ステータスとエラーコードに対応付ける"""
    for exception_type, status_code, error_code in _DOMAIN_ERRORS:
        if isinstance(error, exception_type):
            return error_response(status_code, error_code, str(error))
    return error_response(400, "DOMAIN_ERROR", str(error))


def validation_error_response(error: ValidationError) -> dict:
    """pydantic のバリデーションエラーを 400 に変換する"""
    details = [
        {"loc": list(e["loc"]), "msg": e["msg"]}
        for e in error.errors(include_url=False, include_context=False)
    ]
    return error_response(400, "VALIDATION_ERROR", "Invalid request", details)

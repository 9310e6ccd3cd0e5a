from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain.value_object import AccountId

DEFAULT_DISPLAY_NAME = "Current User"


def _claims(event: APIGatewayProxyEvent) -> dict:
    """Cognito オーソライザーが付与したクレームを取り出す"""
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    return authorizer.get("claims") or {}


def get_account_id(event: APIGatewayProxyEvent) -> AccountId | None:
    """サインイン中のアカウントIDを返す（未認証なら None）"""
    sub = _claims(event).get("sub")
    if not sub:
        return None
    return AccountId(value=sub)


def get_display_name(event: APIGatewayProxyEvent) -> str:
    """表示名を返す（クレームに無ければ既定値）"""
    return _claims(event).get("name") or DEFAULT_DISPLAY_NAME

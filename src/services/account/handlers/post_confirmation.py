from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import event_source
from aws_lambda_powertools.utilities.data_classes.cognito_user_pool_event import (
    PostConfirmationTriggerEvent,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.account.applications.register_profile import RegisterProfileService
from services.account.infrastructure.dynamodb_profile_repository import (
    DynamoDBProfileRepository,
)
from services.shared.domain import AccountId

logger = Logger()

repository = DynamoDBProfileRepository()
service = RegisterProfileService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=PostConfirmationTriggerEvent)
def lambda_handler(event: PostConfirmationTriggerEvent, context: LambdaContext) -> dict:
    """サインアップ完了トリガー Lambda Handler

    予約一覧の格納先となるプロフィールを作成する。
    失敗時は例外を送出し、Cognito にサインアップ完了を失敗させる。
    """
    attributes = event.request.user_attributes
    account_id = AccountId(value=attributes["sub"])
    logger.info("Registering profile", extra={"account_id": str(account_id)})

    service.register(
        account_id=account_id,
        name=attributes.get("name", ""),
        email=attributes.get("email", ""),
    )
    return event.raw_event

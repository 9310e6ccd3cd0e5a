from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.account.applications.get_profile import GetProfileService
from services.account.handlers.response_models import to_response
from services.account.infrastructure.dynamodb_profile_repository import (
    DynamoDBProfileRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    domain_error_response,
    error_response,
    get_account_id,
)

logger = Logger()

repository = DynamoDBProfileRepository()
service = GetProfileService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """プロフィール取得 Lambda Handler (GET /profile)"""
    try:
        profile = service.get(get_account_id(event))
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to load profile")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, to_response(profile))

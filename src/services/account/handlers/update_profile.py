from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.account.applications.update_profile_name import (
    UpdateProfileNameService,
)
from services.account.handlers.request_models import UpdateProfileRequest
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
    validation_error_response,
)

logger = Logger()

repository = DynamoDBProfileRepository()
service = UpdateProfileNameService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """プロフィール名変更 Lambda Handler (PATCH /profile)"""
    logger.info("Received update profile request")

    account_id = get_account_id(event)

    try:
        request = UpdateProfileRequest.model_validate_json(event.body or "{}")
        profile = service.update(account_id, request.name)
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.warning(
            "Update profile rejected",
            extra={"error": type(e).__name__, "account_id": str(account_id)},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to update profile")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, to_response(profile))

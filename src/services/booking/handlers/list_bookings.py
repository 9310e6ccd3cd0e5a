from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.reservation_service import ReservationService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.response_models import to_list_response
from services.booking.infrastructure.dynamodb_booking_ledger_repository import (
    DynamoDBBookingLedgerRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    domain_error_response,
    error_response,
    get_account_id,
)

logger = Logger()

repository = DynamoDBBookingLedgerRepository()
factory = BookingFactory()
service = ReservationService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler (GET /bookings)

    新しい順に並べて返す。各要素の index はキャンセル時に指定する位置。
    """
    logger.info("Listing bookings")

    try:
        entries = service.list_bookings(get_account_id(event), newest_first=True)
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list bookings")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, to_list_response(entries))

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.reservation_service import ReservationService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_ledger_repository import (
    DynamoDBBookingLedgerRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    domain_error_response,
    error_response,
    get_account_id,
    to_index,
)

logger = Logger()

repository = DynamoDBBookingLedgerRepository()
factory = BookingFactory()
service = ReservationService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler (DELETE /bookings/{index})

    index は保存順の位置（一覧レスポンスの index）。
    """
    logger.info("Received cancel booking request")

    account_id = get_account_id(event)
    path_params = event.path_parameters or {}

    try:
        index = to_index(path_params.get("index"))
        booking = service.cancel_booking(account_id, index)
    except DomainException as e:
        logger.warning(
            "Cancel booking rejected",
            extra={"error": type(e).__name__, "account_id": str(account_id)},
        )
        return domain_error_response(e)
    except ValueError as e:
        return error_response(400, "VALIDATION_ERROR", str(e))
    except Exception:
        logger.exception("Failed to cancel booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    logger.info("Booking cancelled", extra={"booking_id": str(booking.id)})
    return api_response(200, to_response(index, booking))

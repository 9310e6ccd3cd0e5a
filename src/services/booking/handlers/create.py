from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.reservation_service import ReservationService
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest
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
    validation_error_response,
)

logger = Logger()

repository = DynamoDBBookingLedgerRepository()
factory = BookingFactory()
service = ReservationService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler (POST /bookings)"""
    logger.info("Received create booking request")

    account_id = get_account_id(event)

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
        booking = service.create_booking(
            account_id=account_id,
            hotel=request.hotel.to_hotel(),
            check_in=request.check_in,
            check_out=request.check_out,
            guests=request.guests,
            rooms=request.rooms,
        )
    except ValidationError as e:
        logger.warning("Invalid create booking request")
        return validation_error_response(e)
    except DomainException as e:
        logger.warning(
            "Create booking rejected",
            extra={"error": type(e).__name__, "account_id": str(account_id)},
        )
        return domain_error_response(e)
    except ValueError as e:
        return error_response(400, "VALIDATION_ERROR", str(e))
    except Exception:
        logger.exception("Failed to create booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    logger.info(
        "Booking confirmed",
        extra={"booking_id": str(booking.id), "hotel_id": booking.hotel.hotel_id},
    )
    return api_response(201, to_response(None, booking))

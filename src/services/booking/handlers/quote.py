from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.quote_booking import QuoteBookingService
from services.booking.handlers.request_models import QuoteRequest
from services.booking.handlers.response_models import to_quote_response
from services.shared.domain import DomainException
from services.shared.utils import (
    api_response,
    domain_error_response,
    error_response,
    validation_error_response,
)

logger = Logger()

service = QuoteBookingService()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """料金見積もり Lambda Handler (POST /bookings/quote)

    予約サマリー表示用。ストレージには触れない。
    """
    logger.info("Received quote request")

    try:
        request = QuoteRequest.model_validate_json(event.body or "{}")
        quote = service.quote(
            hotel=request.hotel.to_hotel(),
            check_in=request.check_in,
            check_out=request.check_out,
            guests=request.guests,
            rooms=request.rooms,
        )
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return domain_error_response(e)
    except ValueError as e:
        return error_response(400, "VALIDATION_ERROR", str(e))
    except Exception:
        logger.exception("Failed to quote booking")
        return error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, to_quote_response(quote))

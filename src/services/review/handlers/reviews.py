import json

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import (
    APIGatewayRestResolver,
    Response,
    content_types,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.review.applications.review_aggregator import ReviewAggregator
from services.review.handlers.request_models import AddReviewRequest
from services.review.handlers.response_models import to_list_response, to_response
from services.review.infrastructure.in_memory_review_repository import (
    InMemoryReviewRepository,
)
from services.shared.domain import DomainException
from services.shared.utils import (
    domain_error_response,
    get_display_name,
    validation_error_response,
)

logger = Logger()
app = APIGatewayRestResolver()

# レビューは実行環境のメモリ上に保持するため、追加と一覧を同じ関数で扱う
aggregator = ReviewAggregator(repository=InMemoryReviewRepository())


def _json_response(status_code: int, body: dict) -> Response:
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str),
    )


def _from_proxy_response(proxy_response: dict) -> Response:
    """api_response 形式の辞書を Response に詰め替える"""
    return Response(
        status_code=proxy_response["statusCode"],
        content_type=content_types.APPLICATION_JSON,
        body=proxy_response["body"],
    )


@app.get("/hotels/<hotel_id>/reviews")
def list_reviews(hotel_id: str) -> Response:
    """ホテルのレビュー一覧（新しい順）"""
    logger.info("Listing reviews", extra={"hotel_id": hotel_id})
    return _json_response(200, to_list_response(aggregator.list_reviews(hotel_id)))


@app.post("/hotels/<hotel_id>/reviews")
def add_review(hotel_id: str) -> Response:
    """レビューを追加する"""
    logger.info("Received add review request", extra={"hotel_id": hotel_id})

    request = AddReviewRequest.model_validate_json(app.current_event.body or "{}")
    review = aggregator.add_review(
        hotel_id=hotel_id,
        rating=request.rating,
        comment=request.comment,
        author=get_display_name(app.current_event),
    )
    return _json_response(201, to_response(review))


@app.exception_handler(ValidationError)
def handle_validation_error(e: ValidationError) -> Response:
    return _from_proxy_response(validation_error_response(e))


@app.exception_handler(DomainException)
def handle_domain_error(e: DomainException) -> Response:
    logger.warning("Review request rejected", extra={"error": type(e).__name__})
    return _from_proxy_response(domain_error_response(e))


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """レビュー Lambda Handler (GET/POST /hotels/{hotel_id}/reviews)"""
    return app.resolve(event, context)

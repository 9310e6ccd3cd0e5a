import json
import os
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラーはモジュール読み込み時に boto3 リソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "af-south-1")
os.environ.setdefault("TABLE_NAME", "booking-table-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service-test")

from services.booking.domain.entity import Booking, BookingLedger  # noqa: E402
from services.booking.domain.enum import BookingStatus  # noqa: E402
from services.booking.domain.service import (  # noqa: E402
    PriceCalculator,
    StayDateValidator,
)
from services.booking.domain.value_object import (  # noqa: E402
    BookingId,
    Hotel,
    HotelSnapshot,
    Quantity,
    StayPeriod,
)
from services.shared.domain import AccountId, IsoDateTime, Money  # noqa: E402


@pytest.fixture
def account_id():
    """全テスト共通の AccountId フィクスチャ"""
    return AccountId(value="account-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def hotel():
    """1泊 R1000 のホテル"""
    return Hotel(
        id="hotel-1",
        name="Table Bay Hotel",
        price=Money.zar(Decimal("1000")),
        location="Cape Town",
        rating=Decimal("4.5"),
        image="https://example.com/table-bay.jpg",
        amenities=("Spa", "Pool"),
    )


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "1704067200000",
        hotel_id: str = "hotel-1",
        hotel_name: str = "Table Bay Hotel",
        check_in: str = "2024-01-01T14:00:00.000Z",
        check_out: str = "2024-01-04T10:00:00.000Z",
        guests: int = 2,
        rooms: int = 1,
        price_amount: Decimal = Decimal("1000"),
        created_at: str = "2024-01-01T00:00:00.000Z",
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        stay_period = StayPeriod.from_strings(check_in, check_out)
        price = Money.zar(price_amount)
        nights = StayDateValidator().nights(
            stay_period.check_in.value, stay_period.check_out.value
        )
        return Booking(
            id=BookingId(value=booking_id),
            hotel=HotelSnapshot(
                hotel_id=hotel_id, hotel_name=hotel_name, price_per_night=price
            ),
            stay_period=stay_period,
            guests=Quantity(value=guests, label="guests"),
            rooms=Quantity(value=rooms, label="rooms"),
            nights=nights,
            total_cost=PriceCalculator().compute_total(nights, price, rooms),
            created_at=IsoDateTime.from_string(created_at),
            status=status,
        )

    return _factory


@pytest.fixture
def create_ledger(account_id):
    """BookingLedger を生成する Factory fixture"""

    def _factory(bookings=(), version: int = 0) -> BookingLedger:
        return BookingLedger(id=account_id, bookings=bookings, version=version)

    return _factory


@pytest.fixture
def hotel_payload():
    """リクエストボディの hotel 部分"""
    return {
        "id": "hotel-1",
        "name": "Table Bay Hotel",
        "location": "Cape Town",
        "price": 1000,
        "rating": 4.5,
        "image": "https://example.com/table-bay.jpg",
        "amenities": ["Spa", "Pool"],
    }


@pytest.fixture
def api_event():
    """API Gateway (REST) プロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/bookings",
        resource: str = "/bookings",
        body: dict | None = None,
        path_parameters: dict | None = None,
        sub: str | None = "account-123",
        name: str | None = "Thandi Mokoena",
    ) -> dict:
        claims = {}
        if sub is not None:
            claims["sub"] = sub
        if name is not None:
            claims["name"] = name
        return {
            "resource": resource,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": path_parameters,
            "stageVariables": None,
            "requestContext": {
                "resourcePath": resource,
                "httpMethod": method,
                "path": path,
                "stage": "prod",
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "authorizer": {"claims": claims} if claims else None,
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性だけを持つコンテキスト"""

    @dataclass
    class LambdaContext:
        function_name: str = "test-function"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:af-south-1:123456789012:function:test-function"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()

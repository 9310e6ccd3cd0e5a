from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from boto3.dynamodb.conditions import Attr
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError, EndpointConnectionError

from services.booking.infrastructure.dynamodb_booking_ledger_repository import (
    DynamoDBBookingLedgerRepository,
)
from services.shared.domain.exception import (
    OptimisticLockException,
    PersistenceException,
)


def _client_error(code: str, operation: str = "UpdateItem") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def repository():
    repository = DynamoDBBookingLedgerRepository(table_name="booking-table-test")
    repository.table = MagicMock()
    return repository


class TestFindById:
    def test_missing_profile_returns_none(self, repository, account_id):
        repository.table.get_item.return_value = {}

        assert repository.find_by_id(account_id) is None
        repository.table.get_item.assert_called_once_with(
            Key={"PK": "ACCOUNT#account-123", "SK": "PROFILE"},
            ConsistentRead=True,
        )

    def test_profile_without_bookings_returns_empty_ledger(
        self, repository, account_id
    ):
        repository.table.get_item.return_value = {
            "Item": {"PK": "ACCOUNT#account-123", "SK": "PROFILE", "name": "Thandi"}
        }

        ledger = repository.find_by_id(account_id)

        assert ledger.account_id == account_id
        assert len(ledger) == 0
        assert ledger.version == 0

    def test_stored_bookings_are_restored_in_order(
        self, repository, account_id, create_booking
    ):
        # Arrange
        first = create_booking(booking_id="1", rooms=2)
        second = create_booking(booking_id="2", hotel_id="hotel-2")
        items = [repository._to_item(first), repository._to_item(second)]
        # DynamoDB は数値を Decimal で返す
        for item in items:
            for key in ("guests", "rooms", "nights"):
                item[key] = Decimal(item[key])
        repository.table.get_item.return_value = {
            "Item": {"bookings": items, "version": Decimal(5)}
        }

        # Act
        ledger = repository.find_by_id(account_id)

        # Assert
        assert ledger.version == 5
        restored_first, restored_second = ledger.bookings
        assert restored_first == first
        assert restored_first.rooms.value == 2
        assert restored_first.total_cost == first.total_cost
        assert restored_first.stay_period == first.stay_period
        assert restored_first.created_at == first.created_at
        assert restored_second.hotel.hotel_id == "hotel-2"

    def test_client_error_becomes_persistence_error(self, repository, account_id):
        repository.table.get_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException", "GetItem"
        )

        with pytest.raises(PersistenceException):
            repository.find_by_id(account_id)


class TestSave:
    def test_save_writes_whole_list_with_next_version(
        self, repository, create_ledger, create_booking
    ):
        # Arrange
        booking = create_booking(booking_id="1")
        ledger = create_ledger([booking], version=3)

        # Act
        repository.save(ledger)

        # Assert
        kwargs = repository.table.update_item.call_args.kwargs
        assert kwargs["Key"] == {"PK": "ACCOUNT#account-123", "SK": "PROFILE"}
        assert kwargs["ExpressionAttributeValues"][":bookings"] == [
            repository._to_item(booking)
        ]
        assert kwargs["ExpressionAttributeValues"][":version"] == 4
        assert kwargs["ConditionExpression"] == (
            Attr("PK").exists() & Attr("version").eq(3)
        )
        assert ledger.version == 4

    def test_first_save_accepts_profile_without_version(
        self, repository, create_ledger
    ):
        ledger = create_ledger()

        repository.save(ledger)

        kwargs = repository.table.update_item.call_args.kwargs
        assert kwargs["ConditionExpression"] == Attr("PK").exists() & (
            Attr("version").not_exists() | Attr("version").eq(0)
        )

    def test_item_uses_snake_case_attributes(self, repository, create_booking):
        item = repository._to_item(create_booking(booking_id="1", rooms=2))

        assert item == {
            "booking_id": "1",
            "hotel_id": "hotel-1",
            "hotel_name": "Table Bay Hotel",
            "hotel_image": None,
            "check_in": "2024-01-01T14:00:00.000Z",
            "check_out": "2024-01-04T10:00:00.000Z",
            "guests": 2,
            "rooms": 2,
            "nights": 3,
            "price_per_night": "1000",
            "total_cost": "6000",
            "currency": "ZAR",
            "created_at": "2024-01-01T00:00:00.000Z",
            "status": "Confirmed",
        }

    def test_conditional_check_failure_raises_optimistic_lock(
        self, repository, create_ledger
    ):
        repository.table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )
        ledger = create_ledger(version=2)

        with pytest.raises(OptimisticLockException):
            repository.save(ledger)

        assert ledger.version == 2

    def test_other_client_error_raises_persistence_error(
        self, repository, create_ledger
    ):
        repository.table.update_item.side_effect = _client_error(
            "InternalServerError"
        )

        with pytest.raises(PersistenceException):
            repository.save(create_ledger())

    def test_connection_error_raises_persistence_error(
        self, repository, create_ledger
    ):
        repository.table.update_item.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.af-south-1.amazonaws.com"
        )

        with pytest.raises(PersistenceException):
            repository.save(create_ledger())

    def test_unserializable_number_raises_persistence_error(
        self, repository, create_ledger
    ):
        """DynamoDB の数値精度（38桁）を超える値はドメイン例外になる"""

        # Arrange
        def serialize(**kwargs):
            serializer = TypeSerializer()
            for value in kwargs["ExpressionAttributeValues"].values():
                serializer.serialize(value)

        repository.table.update_item.side_effect = serialize
        ledger = create_ledger(version=10**40)

        # Act / Assert
        with pytest.raises(PersistenceException):
            repository.save(ledger)

        assert ledger.version == 10**40

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from services.account.applications.register_profile import RegisterProfileService
from services.account.domain.entity import Profile
from services.account.infrastructure.dynamodb_profile_repository import (
    DynamoDBProfileRepository,
)
from services.shared.domain.exception import (
    DuplicateResourceException,
    PersistenceException,
)


class TestProfile:
    def test_name_is_trimmed(self, account_id):
        profile = Profile(id=account_id, name="  Thandi  ", email="t@example.com")
        assert profile.name == "Thandi"

    def test_blank_name_defaults(self, account_id):
        profile = Profile(id=account_id, name=" ", email="t@example.com")
        assert profile.name == "User"


class TestRegisterProfileService:
    def test_register_creates_profile(self, mock_repository, account_id):
        # Arrange
        mock_repository.find_by_id.return_value = None
        service = RegisterProfileService(repository=mock_repository)

        # Act
        profile = service.register(account_id, "Thandi", "t@example.com")

        # Assert
        assert profile.id == account_id
        assert profile.email == "t@example.com"
        mock_repository.save.assert_called_once_with(profile)

    def test_register_is_idempotent(self, mock_repository, account_id):
        existing = Profile(id=account_id, name="Thandi", email="t@example.com")
        mock_repository.find_by_id.return_value = existing
        service = RegisterProfileService(repository=mock_repository)

        profile = service.register(account_id, "Someone Else", "x@example.com")

        assert profile is existing
        mock_repository.save.assert_not_called()

    def test_concurrent_registration_returns_stored_profile(
        self, mock_repository, account_id
    ):
        stored = Profile(id=account_id, name="Thandi", email="t@example.com")
        mock_repository.find_by_id.side_effect = [None, stored]
        mock_repository.save.side_effect = DuplicateResourceException("exists")
        service = RegisterProfileService(repository=mock_repository)

        profile = service.register(account_id, "Thandi", "t@example.com")

        assert profile is stored


class TestDynamoDBProfileRepository:
    @pytest.fixture
    def repository(self):
        repository = DynamoDBProfileRepository(table_name="booking-table-test")
        repository.table = MagicMock()
        return repository

    def test_save_creates_profile_with_empty_ledger(self, repository, account_id):
        repository.save(Profile(id=account_id, name="Thandi", email="t@example.com"))

        item = repository.table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "ACCOUNT#account-123"
        assert item["SK"] == "PROFILE"
        assert item["bookings"] == []
        assert item["version"] == 0

    def test_existing_profile_raises_duplicate(self, repository, account_id):
        repository.table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": "x"}},
            "PutItem",
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(Profile(id=account_id, name="T", email="t@example.com"))

    def test_other_errors_raise_persistence_error(self, repository, account_id):
        repository.table.put_item.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "x"}}, "PutItem"
        )

        with pytest.raises(PersistenceException):
            repository.save(Profile(id=account_id, name="T", email="t@example.com"))

    def test_find_by_id(self, repository, account_id):
        repository.table.get_item.return_value = {
            "Item": {"account_id": "account-123", "name": "Thandi", "email": "t@x.com"}
        }

        profile = repository.find_by_id(account_id)

        assert profile.id == account_id
        assert profile.name == "Thandi"

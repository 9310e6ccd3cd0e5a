import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from services.account.domain.entity import Profile
from services.account.domain.repository import ProfileRepository
from services.shared.domain import AccountId
from services.shared.domain.exception import (
    AccountNotFoundException,
    DuplicateResourceException,
    PersistenceException,
)

PROFILE_SK = "PROFILE"


class DynamoDBProfileRepository(ProfileRepository):
    """DynamoDBを使用したProfileRepository の具象実装

    予約一覧と同じプロフィールアイテムを扱う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, profile: Profile) -> None:
        """プロフィールを空の予約一覧とともに作成する"""
        item = {
            "PK": f"ACCOUNT#{profile.id}",
            "SK": PROFILE_SK,
            "entity_type": "PROFILE",
            "account_id": str(profile.id),
            "name": profile.name,
            "email": profile.email,
            "bookings": [],
            "version": 0,
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Profile already exists: {profile.id}"
                ) from e
            raise PersistenceException(f"Failed to save profile: {profile.id}") from e
        except BotoCoreError as e:
            raise PersistenceException(f"Failed to save profile: {profile.id}") from e

    def find_by_id(self, account_id: AccountId) -> Profile | None:
        """アカウントIDで検索"""
        try:
            response = self.table.get_item(
                Key=self._key(account_id),
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise PersistenceException(f"Failed to load profile: {account_id}") from e

        item = response.get("Item")
        if not item:
            return None
        return Profile(
            id=account_id,
            name=item.get("name", ""),
            email=item.get("email", ""),
            booking_count=len(item.get("bookings", [])),
        )

    def update_name(self, profile: Profile) -> None:
        """名前だけを更新する"""
        try:
            self.table.update_item(
                Key=self._key(profile.id),
                UpdateExpression="SET #name = :name",
                ExpressionAttributeNames={"#name": "name"},
                ExpressionAttributeValues={":name": profile.name},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise AccountNotFoundException(
                    f"User profile not found: {profile.id}"
                ) from e
            raise PersistenceException(
                f"Failed to update profile: {profile.id}"
            ) from e
        except BotoCoreError as e:
            raise PersistenceException(
                f"Failed to update profile: {profile.id}"
            ) from e

    def _key(self, account_id: AccountId) -> dict:
        return {"PK": f"ACCOUNT#{account_id}", "SK": PROFILE_SK}

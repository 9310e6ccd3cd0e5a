import os
from decimal import Decimal, DecimalException

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.entity import Booking, BookingLedger
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingLedgerRepository
from services.booking.domain.value_object import (
    BookingId,
    HotelSnapshot,
    Quantity,
    StayPeriod,
)
from services.shared.domain import AccountId, Currency, IsoDateTime, Money
from services.shared.domain.exception import (
    OptimisticLockException,
    PersistenceException,
)

PROFILE_SK = "PROFILE"


class DynamoDBBookingLedgerRepository(BookingLedgerRepository):
    """DynamoDBを使用したBookingLedgerRepository の具象実装

    予約一覧はプロフィールアイテムの bookings 属性（リスト）に丸ごと保存する。
    version 属性で書き込み時の競合を検出する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, account_id: AccountId) -> BookingLedger | None:
        """プロフィールを読み込み、予約一覧を復元する"""
        try:
            response = self.table.get_item(
                Key=self._key(account_id),
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise PersistenceException(
                f"Failed to load bookings: account_id={account_id}"
            ) from e

        item = response.get("Item")
        if not item:
            return None
        return BookingLedger(
            id=account_id,
            bookings=[self._to_entity(b) for b in item.get("bookings", [])],
            version=int(item.get("version", 0)),
        )

    def save(self, ledger: BookingLedger) -> None:
        """予約一覧を丸ごと書き戻す（version が読み込み時と一致する場合のみ）"""
        expected_version = ledger.version
        condition = Attr("PK").exists()
        if expected_version == 0:
            condition = condition & (
                Attr("version").not_exists() | Attr("version").eq(0)
            )
        else:
            condition = condition & Attr("version").eq(expected_version)

        try:
            self.table.update_item(
                Key=self._key(ledger.account_id),
                UpdateExpression="SET #bookings = :bookings, #version = :version",
                ExpressionAttributeNames={
                    "#bookings": "bookings",
                    "#version": "version",
                },
                ExpressionAttributeValues={
                    ":bookings": [self._to_item(b) for b in ledger.bookings],
                    ":version": expected_version + 1,
                },
                ConditionExpression=condition,
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking ledger was modified concurrently: "
                    f"expected version {expected_version}, "
                    f"account_id={ledger.account_id}"
                ) from e
            raise PersistenceException(
                f"Failed to save bookings: account_id={ledger.account_id}"
            ) from e
        except (BotoCoreError, DecimalException) as e:
            # 38桁を超える数値は TypeSerializer が decimal.Rounded を送出する
            raise PersistenceException(
                f"Failed to save bookings: account_id={ledger.account_id}"
            ) from e

        ledger.increment_version()

    def _key(self, account_id: AccountId) -> dict:
        return {"PK": f"ACCOUNT#{account_id}", "SK": PROFILE_SK}

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB のマップに変換する"""
        return {
            "booking_id": str(booking.id),
            "hotel_id": booking.hotel.hotel_id,
            "hotel_name": booking.hotel.hotel_name,
            "hotel_image": booking.hotel.hotel_image,
            "check_in": str(booking.stay_period.check_in),
            "check_out": str(booking.stay_period.check_out),
            "guests": booking.guests.value,
            "rooms": booking.rooms.value,
            "nights": booking.nights,
            "price_per_night": str(booking.price_per_night.amount),
            "total_cost": str(booking.total_cost.amount),
            "currency": str(booking.total_cost.currency),
            "created_at": str(booking.created_at),
            "status": booking.status.value,
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB のマップをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        return Booking(
            id=BookingId(value=item["booking_id"]),
            hotel=HotelSnapshot(
                hotel_id=item["hotel_id"],
                hotel_name=item["hotel_name"],
                hotel_image=item.get("hotel_image"),
                price_per_night=Money(
                    amount=Decimal(item["price_per_night"]), currency=currency
                ),
            ),
            stay_period=StayPeriod.from_strings(item["check_in"], item["check_out"]),
            guests=Quantity(value=int(item["guests"]), label="guests"),
            rooms=Quantity(value=int(item["rooms"]), label="rooms"),
            nights=int(item["nights"]),
            total_cost=Money(amount=Decimal(item["total_cost"]), currency=currency),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=BookingStatus(item["status"]),
        )

from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import PriceQuote


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    index: int | None = None
    booking_id: str
    hotel_id: str
    hotel_name: str
    hotel_image: str | None = None
    check_in: str
    check_out: str
    guests: int
    rooms: int
    nights: int
    price_per_night: str
    total_cost: str
    currency: str
    created_at: str
    status: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class BookingListData(BaseModel):
    """予約一覧データのレスポンスモデル"""

    bookings: list[BookingData]
    count: int


class BookingListResponse(BaseModel):
    """予約一覧レスポンスモデル"""

    status: str = "success"
    data: BookingListData


class QuoteData(BaseModel):
    """見積もりデータのレスポンスモデル"""

    nights: int
    price_per_night: str
    rooms: int
    total: str
    currency: str


class QuoteResponse(BaseModel):
    """見積もりレスポンスモデル"""

    status: str = "success"
    data: QuoteData


def to_booking_data(index: int | None, booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスデータに変換する"""
    return BookingData(
        index=index,
        booking_id=str(booking.id),
        hotel_id=booking.hotel.hotel_id,
        hotel_name=booking.hotel.hotel_name,
        hotel_image=booking.hotel.hotel_image,
        check_in=str(booking.stay_period.check_in),
        check_out=str(booking.stay_period.check_out),
        guests=booking.guests.value,
        rooms=booking.rooms.value,
        nights=booking.nights,
        price_per_night=str(booking.price_per_night.amount),
        total_cost=str(booking.total_cost.amount),
        currency=str(booking.total_cost.currency),
        created_at=str(booking.created_at),
        status=booking.status.value,
    )


def to_response(index: int | None, booking: Booking) -> dict:
    """単一の予約をレスポンス辞書に変換する"""
    return SuccessResponse(data=to_booking_data(index, booking)).model_dump()


def to_list_response(entries: list[tuple[int, Booking]]) -> dict:
    """予約一覧をレスポンス辞書に変換する"""
    bookings = [to_booking_data(index, booking) for index, booking in entries]
    return BookingListResponse(
        data=BookingListData(bookings=bookings, count=len(bookings))
    ).model_dump()


def to_quote_response(quote: PriceQuote) -> dict:
    """見積もりをレスポンス辞書に変換する"""
    return QuoteResponse(
        data=QuoteData(
            nights=quote.nights,
            price_per_night=str(quote.price_per_night.amount),
            rooms=quote.rooms,
            total=str(quote.total.amount),
            currency=str(quote.total.currency),
        )
    ).model_dump()

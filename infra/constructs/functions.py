from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            "booking-service",
            common_layer,
            table,
        )

        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            "booking-service",
            common_layer,
            table,
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
            "booking-service",
            common_layer,
            table,
        )

        # 見積もり・レビューはテーブルを使わない
        self.quote_booking = self._create_function(
            "QuoteBookingLambda",
            "services.booking.handlers.quote.lambda_handler",
            "booking-service",
            common_layer,
        )

        self.reviews = self._create_function(
            "ReviewsLambda",
            "services.review.handlers.reviews.lambda_handler",
            "review-service",
            common_layer,
        )

        self.get_profile = self._create_function(
            "GetProfileLambda",
            "services.account.handlers.get_profile.lambda_handler",
            "account-service",
            common_layer,
            table,
        )

        self.update_profile = self._create_function(
            "UpdateProfileLambda",
            "services.account.handlers.update_profile.lambda_handler",
            "account-service",
            common_layer,
            table,
        )

        self.post_confirmation = self._create_function(
            "PostConfirmationLambda",
            "services.account.handlers.post_confirmation.lambda_handler",
            "account-service",
            common_layer,
            table,
        )

        for fn in [
            self.create_booking,
            self.cancel_booking,
            self.update_profile,
            self.post_confirmation,
        ]:
            table.grant_read_write_data(fn)

        table.grant_read_data(self.list_bookings)
        table.grant_read_data(self.get_profile)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        common_layer: _lambda.LayerVersion,
        table: dynamodb.Table | None = None,
    ) -> _lambda.Function:
        environment = {
            "POWERTOOLS_SERVICE_NAME": service_name,
            "POWERTOOLS_LOG_LEVEL": "INFO",
        }
        if table is not None:
            environment["TABLE_NAME"] = table.table_name

        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment=environment,
        )

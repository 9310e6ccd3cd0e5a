from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        user_pool: cognito.IUserPool,
        create_booking: _lambda.Function,
        cancel_booking: _lambda.Function,
        list_bookings: _lambda.Function,
        quote_booking: _lambda.Function,
        reviews: _lambda.Function,
        get_profile: _lambda.Function,
        update_profile: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Hotel Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        # Cognito Authorizer: claims.sub をアカウントIDとして扱う
        authorizer = apigw.CognitoUserPoolsAuthorizer(
            self,
            "BookingAuthorizer",
            cognito_user_pools=[user_pool],
        )

        def add(resource: apigw.Resource, method: str, fn: _lambda.Function) -> None:
            resource.add_method(
                method,
                apigw.LambdaIntegration(fn),
                authorizer=authorizer,
                authorization_type=apigw.AuthorizationType.COGNITO,
            )

        # /bookings
        bookings = self.rest_api.root.add_resource("bookings")
        add(bookings, "POST", create_booking)
        add(bookings, "GET", list_bookings)

        # POST /bookings/quote
        add(bookings.add_resource("quote"), "POST", quote_booking)

        # DELETE /bookings/{index}
        add(bookings.add_resource("{index}"), "DELETE", cancel_booking)

        # /hotels/{hotel_id}/reviews -> 1つの Lambda で GET/POST を処理する
        hotel_reviews = (
            self.rest_api.root.add_resource("hotels")
            .add_resource("{hotel_id}")
            .add_resource("reviews")
        )
        add(hotel_reviews, "GET", reviews)
        add(hotel_reviews, "POST", reviews)

        # /profile
        profile = self.rest_api.root.add_resource("profile")
        add(profile, "GET", get_profile)
        add(profile, "PATCH", update_profile)

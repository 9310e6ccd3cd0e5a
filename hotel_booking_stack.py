from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Auth, Database, Functions, Layers


class HotelBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
        )

        auth = Auth(
            self,
            "Auth",
            post_confirmation=fns.post_confirmation,
        )

        api = Api(
            self,
            "Api",
            user_pool=auth.user_pool,
            create_booking=fns.create_booking,
            cancel_booking=fns.cancel_booking,
            list_bookings=fns.list_bookings,
            quote_booking=fns.quote_booking,
            reviews=fns.reviews,
            get_profile=fns.get_profile,
            update_profile=fns.update_profile,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "UserPoolId", value=auth.user_pool.user_pool_id)
        CfnOutput(
            self, "UserPoolClientId", value=auth.user_pool_client.user_pool_client_id
        )

from aws_cdk import RemovalPolicy
from aws_cdk import aws_cognito as cognito
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Auth(Construct):
    """Cognito User Pool Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        post_confirmation: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.user_pool = cognito.UserPool(
            self,
            "BookingUserPool",
            self_sign_up_enabled=True,
            sign_in_aliases=cognito.SignInAliases(email=True),
            auto_verify=cognito.AutoVerifiedAttrs(email=True),
            standard_attributes=cognito.StandardAttributes(
                fullname=cognito.StandardAttribute(required=False, mutable=True),
            ),
            removal_policy=RemovalPolicy.DESTROY,
        )

        # サインアップ完了時にプロフィール（空の予約一覧）を作成する
        self.user_pool.add_trigger(
            cognito.UserPoolOperation.POST_CONFIRMATION, post_confirmation
        )

        self.user_pool_client = self.user_pool.add_client(
            "BookingWebClient",
            auth_flows=cognito.AuthFlow(user_srp=True),
        )

import os

from aws_lambda_powertools import Logger


def get_logger(service_name: str) -> Logger:
    """サービス名付きの構造化ロガーを返す

    POWERTOOLS_SERVICE_NAME が設定されていればそちらを優先する。
    """
    return Logger(service=os.getenv("POWERTOOLS_SERVICE_NAME", service_name))

from enum import StrEnum


class ApiVersion(StrEnum):
    ONE = "v1"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"


class ProviderErrorType(StrEnum):
    INVALID_CUSTOMER_NUM = "invalid_customer_num"
    EXCEEDED_DAILY_LIMIT = "exceeded_daily_limit"

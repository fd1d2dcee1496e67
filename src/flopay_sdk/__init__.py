from flopay_sdk.auth import AccessToken
from flopay_sdk.client import FlopayClient, FlopayRequest
from flopay_sdk.config import FlopayCredentials, get_credentials
from flopay_sdk.exceptions import (
    AuthenticationError,
    ExceededDailyLimit,
    FlopayError,
    InvalidCredentialError,
    InvalidCustomerNumber,
    NotAuthorizedError,
    ProviderError,
    ResponseNotSetError,
    UnknownProviderError,
)
from flopay_sdk.models import TransferInput, TransferOutput, TransferResponse
from flopay_sdk.pay import TransferRequest, decode_response

"""Payouts to Mobile Money wallets.

See https://developer.flopay.io/pay-out/mobile-wallet for the endpoint's
request and response shapes.
"""

import logging
from collections.abc import Mapping
from typing import Any

from flopay_sdk.exceptions import (
    ExceededDailyLimit,
    InvalidCustomerNumber,
    ProviderError,
    ResponseNotSetError,
    UnknownProviderError,
)
from flopay_sdk.models import TransferInput, TransferOutput, TransferResponse
from flopay_sdk.types import HttpMethod, ProviderErrorType


log = logging.getLogger(__name__)

_ERRORS: dict[str, type[ProviderError]] = {
    ProviderErrorType.INVALID_CUSTOMER_NUM: InvalidCustomerNumber,
    ProviderErrorType.EXCEEDED_DAILY_LIMIT: ExceededDailyLimit,
}


def decode_response(data: dict[str, Any]) -> TransferOutput | ProviderError:
    """Turn a raw transfer reply into an output or an error value.

    The error is returned, not raised, so callers can match on it.
    """

    detail = data.get("response") or {}

    if data.get("success") is False:
        error_type = detail.get("message_type") or detail.get("error_type")
        message = detail.get("message") or detail.get("error_message")
        error_cls = _ERRORS.get(error_type, UnknownProviderError)

        log.warning("Transfer failed: %s (%s)", error_type, message)

        return error_cls(message, error_type=error_type, payload=data)

    return TransferOutput(
        success=True,
        response=TransferResponse(
            reference=detail.get("reference"),
            provider=detail.get("provider"),
            recipient=detail.get("recipient"),
            amount=detail.get("amount"),
            currency=detail.get("currency"),
            message=detail.get("message"),
        ),
    )


class TransferRequest:
    """A single Mobile Money transfer call.

    Holds one input and one response slot, so build a new request for
    every transfer.
    """

    to: str = "transfer.json"
    method: HttpMethod = HttpMethod.POST

    def __init__(self, params: TransferInput | Mapping[str, Any]) -> None:
        if not isinstance(params, TransferInput):
            params = TransferInput.model_validate(params)

        self._input = params
        self._output: TransferOutput | None = None
        self._raw: dict[str, Any] | None = None

    @property
    def input(self) -> TransferInput:
        return self._input

    @property
    def body(self) -> dict[str, Any]:
        return self._input.to_wire()

    @property
    def response(self) -> dict[str, Any] | None:
        return self._raw

    @response.setter
    def response(self, data: dict[str, Any]) -> None:
        self._raw = data

        result = decode_response(data)

        if isinstance(result, ProviderError):
            raise result

        self._output = result

    @property
    def output(self) -> TransferOutput:
        if self._output is None:
            raise ResponseNotSetError("No successful response has been assigned yet")

        return self._output

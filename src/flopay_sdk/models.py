from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransferInput(BaseModel):
    """Parameters for a payment to a Mobile Money account.

    Every field is declared with the camelCase name used by the JS and
    REST docs (accepted on input) and the snake_case name Flopay expects
    on the wire. Python names work too.

    Values are stored as given. Nothing is checked here, a missing or
    malformed field comes back as an error from Flopay.

    While ``provider`` is optional it's worth setting: the automatic
    operator detection goes wrong for ported numbers (a VODAFONE user
    can own a number starting with 024, which belongs to MTN).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # required by Flopay
    sender_amount: Any = Field(
        default=None, alias="senderAmount", serialization_alias="sender_amount"
    )  # Decimal, e.g. Decimal("12.34")
    sender_currency: Any = Field(
        default=None, alias="senderCurrency", serialization_alias="sender_currency"
    )  # e.g. GHS
    recipient_amount: Any = Field(
        default=None, alias="recipientAmount", serialization_alias="recipient_amount"
    )
    recipient_currency: Any = Field(
        default=None,
        alias="recipientCurrency",
        serialization_alias="recipient_currency",
    )
    recipient_no: Any = Field(
        default=None, alias="recipientNo", serialization_alias="recipient_no"
    )  # Mobile Money account number
    country_code: Any = Field(
        default=None, alias="countryCode", serialization_alias="country_code"
    )
    service_code: Any = Field(
        default=None, alias="serviceCode", serialization_alias="service_code"
    )  # e.g. cashin

    # optional
    reference: Any = Field(
        default=None, alias="reference", serialization_alias="reference"
    )
    callback_urls: Any = Field(
        default=None, alias="callbackURLs", serialization_alias="callback_urls"
    )
    recipient_name: Any = Field(
        default=None, alias="recipientName", serialization_alias="recipient_name"
    )
    provider: Any = Field(
        default=None, alias="provider", serialization_alias="provider"
    )
    live: Any = Field(default=None, alias="live", serialization_alias="live")

    def to_wire(self) -> dict[str, Any]:
        """Wire mapping of the fields that were given, values untouched."""

        return self.model_dump(by_alias=True, exclude_unset=True)


class TransferResponse(BaseModel):
    """Success payload as Flopay sent it, missing fields are None."""

    reference: Any = None
    provider: Any = None
    recipient: Any = None
    amount: Any = None
    currency: Any = None
    message: Any = None


class TransferOutput(BaseModel):
    success: bool
    response: TransferResponse

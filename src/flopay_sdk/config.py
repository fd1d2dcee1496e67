"""Configuration from environment variables."""

import os
from dataclasses import dataclass

from flopay_sdk.exceptions import InvalidCredentialError


ENV_CLIENT_ID = "FLOPAY_CLIENT_ID"
ENV_CLIENT_SECRET = "FLOPAY_CLIENT_SECRET"


@dataclass(frozen=True)
class FlopayCredentials:
    client_id: str
    client_secret: str


def get_credentials() -> FlopayCredentials:
    """Get Flopay client credentials from environment variables.

    Expected env vars: FLOPAY_CLIENT_ID, FLOPAY_CLIENT_SECRET

    Only a variable that is not set at all counts as missing, an empty
    value is passed through as-is.
    """

    client_id = os.environ.get(ENV_CLIENT_ID)
    client_secret = os.environ.get(ENV_CLIENT_SECRET)

    if client_id is None or client_secret is None:
        raise InvalidCredentialError()

    return FlopayCredentials(client_id=client_id, client_secret=client_secret)

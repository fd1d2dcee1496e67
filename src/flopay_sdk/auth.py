"""Access token handling for the Flopay API.

Flopay issues bearer tokens through a client-credentials exchange:
the client id and secret are posted as JSON and the reply carries
an access token that is valid for an hour from issuance.

Tokens are never refreshed automatically; callers re-run
``FlopayClient.authorize()`` when ``is_authorized()`` turns false.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any

from flopay_sdk.config import FlopayCredentials
from flopay_sdk.exceptions import AuthenticationError


log = logging.getLogger(__name__)

AUTH_PATH = "token.json"
TOKEN_LIFETIME = 3600


@dataclass
class AccessToken:
    access_token: str
    token_type: str
    expires_at: float

    def expires_in(self, now: float | None = None) -> float:
        if now is None:
            now = time.time()

        return self.expires_at - now

    def is_expired(self, now: float | None = None) -> bool:
        return self.expires_in(now) <= 0


def auth_request_body(creds: FlopayCredentials) -> dict[str, str]:
    return {
        "client_id": creds.client_id,
        "client_secret": creds.client_secret,
    }


def parse_token(body: dict[str, Any], issued_at: float | None = None) -> AccessToken:
    """Build an AccessToken from the auth endpoint's JSON reply.

    ``expires_in`` falls back to TOKEN_LIFETIME when the reply omits it.
    """

    if not isinstance(body, dict) or not body.get("access_token"):
        raise AuthenticationError(f"No access token in auth response: {body}")

    if issued_at is None:
        issued_at = time.time()

    tokens = AccessToken(
        access_token=body["access_token"],
        token_type=body.get("token_type", "Bearer"),
        expires_at=issued_at + body.get("expires_in", TOKEN_LIFETIME),
    )

    log.debug("Parsed access token, expires at %s", time.ctime(tokens.expires_at))

    return tokens

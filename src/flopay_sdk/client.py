"""Flopay API v1 client.

A client starts out without an access token, so ``authorize()`` has to be
the first call made before sending any request through it.
"""

import logging
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter
from flopay_sdk.auth import AUTH_PATH, AccessToken, auth_request_body, parse_token
from flopay_sdk.config import FlopayCredentials, get_credentials
from flopay_sdk.exceptions import NotAuthorizedError
from flopay_sdk.types import ApiVersion


log = logging.getLogger(__name__)

BASE_URL = "https://api.flopay.io"

# Decimals are written as exact strings, never through float
_BODY: TypeAdapter[Any] = TypeAdapter(Any)


class FlopayRequest(Protocol):
    """Anything ``FlopayClient.send`` can dispatch."""

    @property
    def to(self) -> str: ...

    @property
    def method(self) -> str: ...

    @property
    def body(self) -> dict[str, Any]: ...

    @property
    def response(self) -> dict[str, Any] | None: ...

    @response.setter
    def response(self, data: dict[str, Any]) -> None: ...


R = TypeVar("R", bound=FlopayRequest)


class FlopayClient:
    """Flopay API v1 client using httpx."""

    base_url: str = BASE_URL
    version: ApiVersion = ApiVersion.ONE

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        *,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.cred = FlopayCredentials(client_id=client_id, client_secret=client_secret)
        self._token: AccessToken | None = None
        self._owns_http = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "FlopayClient":
        """Make a client from the FLOPAY_CLIENT_{ID, SECRET} env vars.

        Raises InvalidCredentialError when either variable is not set.
        """

        creds = get_credentials()

        return cls(creds.client_id, creds.client_secret, **kwargs)

    @property
    def access_token(self) -> AccessToken | None:
        return self._token

    def endpoint(self, path: str) -> str:
        return f"{self.base_url}/{self.version}/{path}"

    def authorize(self) -> AccessToken:
        """Acquire a new access token for this client.

        The granted token is valid for 3600s from now. Safe to call again
        once the token has expired, or earlier to replace it.
        """

        url = self.endpoint(AUTH_PATH)
        log.info("Requesting access token from %s", url)

        resp = self._http.post(url, json=auth_request_body(self.cred))
        body = resp.json()

        self._token = parse_token(body)

        log.info(
            "Client authorized, token expires in %.0fs", self._token.expires_in()
        )

        return self._token

    def is_authorized(self) -> bool:
        """True if a token is held and has not expired yet."""

        return self._token is not None and not self._token.is_expired()

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "authorization": f"Bearer {self._token.access_token}",
            "content-type": "application/json",
        }

    def send(self, request: R) -> R:
        """Perform ``request`` and assign the JSON reply to its response.

        Provider errors raised by the request's response handling
        propagate to the caller, as do transport and decode errors.
        """

        if not self.is_authorized():
            raise NotAuthorizedError(
                "Client has no valid access token, call authorize() first"
            )

        url = self.endpoint(request.to)
        log.debug("%s %s", request.method, url)

        resp = self._http.request(
            str(request.method),
            url,
            content=_BODY.dump_json(request.body),
            headers=self._headers(),
        )

        request.response = resp.json()

        return request

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "FlopayClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

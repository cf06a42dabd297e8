"""Credentials for the FreshBooks Classic API and how they are applied."""

from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx
from oauthlib.oauth1 import SIGNATURE_PLAINTEXT, SIGNATURE_TYPE_AUTH_HEADER
from oauthlib.oauth1 import Client as OAuth1Client

# FreshBooks ignores the password half of token authentication.
TOKEN_PASSWORD = "X"


@dataclass(frozen=True)
class APIToken:
    """Static authentication token from the FreshBooks account settings."""

    token: str

    def __repr__(self) -> str:
        return "APIToken(token='***')"


@dataclass(frozen=True)
class OAuthToken:
    """Delegated OAuth 1.0a credential, signed with PLAINTEXT.

    Obtaining the token pair is out of band; this only signs requests.
    """

    consumer_key: str
    consumer_secret: str
    token: str
    token_secret: str
    realm: str = ""

    def auth_header(self, url: str, http_method: str = "POST") -> str:
        """Compute the Authorization header value for one request."""
        signer = OAuth1Client(
            self.consumer_key,
            client_secret=self.consumer_secret,
            resource_owner_key=self.token,
            resource_owner_secret=self.token_secret,
            signature_method=SIGNATURE_PLAINTEXT,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            realm=self.realm or None,
        )
        _, headers, _ = signer.sign(url, http_method=http_method)
        return headers["Authorization"]

    def __repr__(self) -> str:
        return f"OAuthToken(consumer_key={self.consumer_key!r}, token='***')"


Credential = Union[APIToken, OAuthToken]


def coerce_credential(value: Any) -> Optional[Credential]:
    """Accept a credential, a bare token string, or None.

    Anything else is a programming error and raises TypeError.
    """
    if value is None or isinstance(value, (APIToken, OAuthToken)):
        return value
    if isinstance(value, str):
        return APIToken(value)
    raise TypeError(
        f"credential must be a str, APIToken or OAuthToken, not {type(value).__name__}"
    )


def select_auth(credential: Optional[Credential], url: str) -> dict[str, Any]:
    """Keyword arguments that authenticate an httpx request.

    Without a usable credential the request goes out unauthenticated and
    the service decides how to reject it.
    """
    if isinstance(credential, APIToken) and credential.token:
        return {"auth": httpx.BasicAuth(credential.token, TOKEN_PASSWORD)}
    if isinstance(credential, OAuthToken):
        return {"headers": {"Authorization": credential.auth_header(url)}}
    return {}

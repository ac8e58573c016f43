"""
Administrator sign-in backed by Google ID tokens.
"""

from typing import List, Optional

import requests
from fastapi import Header
from pydantic import BaseModel

from council_archive.config import config
from council_archive.utils.error_handling import AuthenticationError, PermissionDeniedError
from council_archive.utils.logger import logging


class Operator(BaseModel):
    """A signed-in administrator."""
    email: str
    name: Optional[str] = None


class GoogleIdentityVerifier:
    """Verify Google ID tokens with Google's tokeninfo endpoint."""

    def __init__(
        self,
        client_id: Optional[str] = config.GOOGLE_CLIENT_ID,
        admin_emails: Optional[List[str]] = None,
        tokeninfo_url: str = config.GOOGLE_TOKENINFO_URL,
        timeout: float = config.HTTP_TIMEOUT,
    ):
        self.client_id = client_id
        self.admin_emails = config.admin_emails() if admin_emails is None else [e.lower() for e in admin_emails]
        self.tokeninfo_url = tokeninfo_url
        self.timeout = timeout

    def verify(self, id_token: str) -> Operator:
        """
        Resolve an ID token to the operator it was issued for.

        Args:
            id_token: Google ID token sent by the front end

        Returns:
            The signed-in Operator

        Raises:
            AuthenticationError: If the token is missing, invalid or for another client
            PermissionDeniedError: If the account is not an administrator
        """
        if not id_token:
            raise AuthenticationError()

        try:
            response = requests.get(self.tokeninfo_url, params={"id_token": id_token}, timeout=self.timeout)
        except requests.RequestException as e:
            logging.error(f"Token verification request failed: {str(e)}")
            raise AuthenticationError("トークンを検証できませんでした") from e

        if response.status_code != 200:
            raise AuthenticationError("トークンが無効です")

        try:
            claims = response.json()
        except ValueError as e:
            logging.error(f"Unreadable tokeninfo response: {str(e)}")
            raise AuthenticationError("トークンが無効です") from e
        if self.client_id and claims.get("aud") != self.client_id:
            logging.warning(f"Rejected token issued for audience {claims.get('aud')}")
            raise AuthenticationError("トークンが無効です")

        email = claims.get("email")
        if not email or str(claims.get("email_verified", "")).lower() != "true":
            raise AuthenticationError("メールアドレスが確認されていません")

        if self.admin_emails and email.lower() not in self.admin_emails:
            logging.warning(f"Sign-in by non-administrator {email}")
            raise PermissionDeniedError()

        return Operator(email=email, name=claims.get("name"))


def get_identity_verifier() -> GoogleIdentityVerifier:
    """FastAPI dependency returning the configured verifier."""
    return GoogleIdentityVerifier()


def bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    """Read the bearer token from the Authorization header."""
    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthenticationError()
    return authorization[7:].strip()

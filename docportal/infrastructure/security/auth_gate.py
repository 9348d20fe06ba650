"""Bearer-token gate for protected endpoints.

Turns the raw Authorization header into the authenticated user id, or raises
AuthenticationException. Every failure (missing header, wrong scheme, bad
signature, malformed token, expired token, bad subject) yields the same
exception and message, so callers cannot probe which check failed.

The gate trusts the signature alone and performs no database lookup: a token
stays valid until exp even if its user is deleted afterwards.
"""

import logging
from uuid import UUID

from docportal.core.constants import BEARER_PREFIX
from docportal.domain.exceptions import AuthenticationException
from docportal.infrastructure.security.jwt import DEFAULT_ALGORITHM, verify_token

logger = logging.getLogger(__name__)


class AuthGate:
    """Verify `Authorization: Bearer <jwt>` and return the subject user id."""

    def __init__(self, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._secret = secret
        self._algorithm = algorithm

    def authenticate(self, authorization: str | None) -> UUID:
        """Return the user id carried by a valid bearer token.

        Raises:
            AuthenticationException: For any missing, malformed, invalid or expired credential.
        """
        if not authorization:
            logger.debug("Rejected request: missing Authorization header")
            raise AuthenticationException()
        if not authorization.startswith(BEARER_PREFIX):
            logger.debug("Rejected request: Authorization scheme is not Bearer")
            raise AuthenticationException()
        token = authorization[len(BEARER_PREFIX):]
        if not token or token != token.strip():
            raise AuthenticationException()
        try:
            payload = verify_token(token, self._secret, algorithm=self._algorithm)
            return UUID(str(payload["sub"]))
        except (ValueError, KeyError, TypeError) as e:
            logger.debug("Rejected request: %s", type(e).__name__)
            raise AuthenticationException() from None

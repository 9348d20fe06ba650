"""JWT token creation and verification for authentication.

Claims are `{sub: <user id>, exp: <unix seconds>}`, signed with a symmetric
secret (HS256 by default). Secret and algorithm are passed in explicitly.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

DEFAULT_ALGORITHM = "HS256"


def create_access_token(
    subject: str,
    secret: str,
    *,
    expires_delta: timedelta,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Create a signed JWT access token for subject.

    Args:
        subject: Value of the sub claim (user id).
        secret: Symmetric signing secret.
        expires_delta: Token lifetime; exp = now + expires_delta.
        algorithm: JWS algorithm.

    Returns:
        Encoded JWT string.
    """
    to_encode: dict[str, Any] = {
        "sub": subject,
        "exp": datetime.now(UTC) + expires_delta,
    }
    encoded = jwt.encode(to_encode, secret, algorithm=algorithm)
    return cast(str, encoded)


def verify_token(
    token: str,
    secret: str,
    *,
    algorithm: str = DEFAULT_ALGORITHM,
) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub. Raises ValueError if the token is
    invalid, expired, or missing required claims.

    Args:
        token: JWT string (e.g. from Authorization header).
        secret: Symmetric signing secret.
        algorithm: The only algorithm accepted.

    Returns:
        Decoded payload dict.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload

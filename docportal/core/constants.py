"""Core constants shared across layers."""

# Initial status for new collections and requests.
STATUS_PENDING = "pending"

# Authorization header scheme accepted by the auth gate (case-sensitive).
BEARER_PREFIX = "Bearer "

MIN_PASSWORD_LENGTH = 8

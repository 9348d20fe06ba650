"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules (auth) use the
same instance without circular imports. Only the public credential
endpoints are limited; the bearer-token gate on protected routes is not.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
REGISTER_LIMIT = "5/minute"

limit_login = limiter.limit(LOGIN_LIMIT)
limit_register = limiter.limit(REGISTER_LIMIT)

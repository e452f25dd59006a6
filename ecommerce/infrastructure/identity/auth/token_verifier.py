"""Access token verification."""

import jwt
import structlog

from ecommerce.domain.common.value_objects.ids import UserId
from ecommerce.exceptions import InvalidTokenError

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"


class JwtTokenVerifier:
    """Verify HS256 access tokens and extract the user id from ``sub``."""

    def __init__(self, secret_key: str, algorithm: str = ALGORITHM) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm

    def verify_access_token(self, token: str) -> int:
        """
        Verify an access token and return the user id it was issued for.

        Raises:
            InvalidTokenError: Malformed, expired, wrongly signed, a refresh
                token, or missing a numeric subject
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("token_rejected", reason="expired")
            raise InvalidTokenError() from None
        except jwt.InvalidTokenError as e:
            logger.info("token_rejected", reason="invalid", error=str(e))
            raise InvalidTokenError() from None

        # Refresh tokens are only valid at the refresh endpoint
        if payload.get("type") == "refresh":
            logger.info("token_rejected", reason="refresh_token")
            raise InvalidTokenError()

        subject = payload.get("sub")
        try:
            user_id = int(subject)
        except (TypeError, ValueError):
            logger.info("token_rejected", reason="bad_subject")
            raise InvalidTokenError() from None

        if not UserId.in_range(user_id):
            logger.info("token_rejected", reason="subject_out_of_range")
            raise InvalidTokenError()
        return user_id

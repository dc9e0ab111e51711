"""
Activation domain service - Redeem activation tokens.
"""

import logging
from dataclasses import dataclass

from .exceptions import InvalidTokenError
from .ports import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class ActivationService:
    """Flips a user from inactive to active when presented its token."""

    repository: UserRepository

    def activate(self, token: str) -> int:
        """
        Activate the user holding the given token.

        Tokens are single use: activation clears the token, so presenting
        it again (or a token for an already active user) fails.

        Returns:
            Id of the activated user

        Raises:
            InvalidTokenError: If no user holds the token
        """
        user_id = self.repository.activate(token)
        if user_id is None:
            logger.info("Activation rejected for unknown or used token")
            raise InvalidTokenError()
        logger.info("Activated user id=%s", user_id)
        return user_id

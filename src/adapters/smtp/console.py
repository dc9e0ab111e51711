"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging activation tokens to stdout for demo purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints activation tokens to stdout.
    """

    def send_activation_email(self, email: str, token: str) -> None:
        """
        Log activation token to console (simulates email delivery).

        Args:
            email: Recipient email address (normalized by domain layer)
            token: Activation token
        """
        logger.info("[ACTIVATION] Email: %s Token: %s", email, token)

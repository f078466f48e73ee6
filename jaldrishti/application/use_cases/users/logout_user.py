"""Use-case for ending a browser session."""

from __future__ import annotations

from jaldrishti.shared.logging import logger


class LogoutUserUseCase:
    """Sessions are stateless, so logout only tells the client to drop its cookie.

    A token copied before logout stays valid until its own expiry.
    """

    def execute(self, user_id: int | None) -> None:
        logger.info(f"auth.logout: user_id={user_id}")

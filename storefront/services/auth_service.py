"""
Administrator authentication use cases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from storefront.core.config import Settings
from storefront.services.session_service import SessionStore

logger = logging.getLogger(__name__)


def check_admin_credentials(settings: Settings, username: Any, password: Any) -> bool:
    """Exact match on both fields; no trimming, no case folding."""
    if not isinstance(username, str) or not isinstance(password, str):
        return False
    return username == settings.admin_username and password == settings.admin_password


@dataclass
class AdminIdentity:
    authenticated: bool
    role: Optional[str] = None
    username: Optional[str] = None

    def as_dict(self) -> dict:
        if not self.authenticated:
            return {"authenticated": False}
        return {"authenticated": True, "role": self.role, "username": self.username}


@dataclass
class AdminAuthService:
    """Login, logout and identity lookups for the single configured administrator."""

    settings: Settings
    sessions: SessionStore

    def login(self, username: Any, password: Any) -> Optional[str]:
        """Return a fresh session token, or None when the credentials do not match."""
        if not check_admin_credentials(self.settings, username, password):
            logger.warning("Admin login rejected for username %r", username if isinstance(username, str) else None)
            return None
        token = self.sessions.create()
        logger.info("Admin %s logged in", self.settings.admin_username)
        return token

    def logout(self, token: Optional[str]) -> None:
        if not token:
            return
        self.sessions.revoke(token)
        logger.info("Admin session closed")

    def whoami(self, token: Optional[str]) -> AdminIdentity:
        if self.sessions.is_valid(token):
            return AdminIdentity(True, role="admin", username=self.settings.admin_username)
        return AdminIdentity(False)

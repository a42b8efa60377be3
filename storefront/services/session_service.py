"""Admin session helpers (token registry, cookies, request guard)."""
from __future__ import annotations

import threading
from typing import Optional, Protocol

from fastapi import HTTPException, Request, Response

from storefront.core.utils import new_session_token

ADMIN_COOKIE_NAME = "admin_token"


class SessionStore(Protocol):
    """Registry of tokens that currently represent a logged-in administrator."""

    def create(self) -> str: ...

    def is_valid(self, token: Optional[str]) -> bool: ...

    def revoke(self, token: Optional[str]) -> None: ...


class InMemorySessionStore:
    """
    Process-local token set. Tokens never expire; a restart drops all of them.
    """

    def __init__(self) -> None:
        self._tokens: set[str] = set()
        self._lock = threading.Lock()

    def create(self) -> str:
        with self._lock:
            token = new_session_token()
            while token in self._tokens:
                token = new_session_token()
            self._tokens.add(token)
        return token

    def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        with self._lock:
            return token in self._tokens

    def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._tokens.discard(token)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def admin_token(request: Request) -> Optional[str]:
    return request.cookies.get(ADMIN_COOKIE_NAME) or None


def require_admin(request: Request) -> str:
    """Dependency for admin-only routes; returns the session token."""
    token = admin_token(request)
    if not get_session_store(request).is_valid(token):
        raise HTTPException(401, "Admin authentication required")
    return token


def set_admin_cookie(response: Response, token: str, *, secure: bool = False) -> None:
    response.set_cookie(
        ADMIN_COOKIE_NAME,
        token,
        httponly=True,
        secure=secure,
        samesite="lax",
        path="/",
    )


def clear_admin_cookie(response: Response) -> None:
    response.delete_cookie(ADMIN_COOKIE_NAME, path="/")

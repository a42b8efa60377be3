"""
Visitor account use cases (registration and login).

Failures come back as result objects carrying an error code; nothing here
raises for bad input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from storefront.core.config import Settings
from storefront.core.security import store_password, verify_password
from storefront.core.utils import new_record_id, utc_timestamp
from storefront.domain.users import is_reserved_username, normalize_username, username_in_use
from storefront.repositories.json_storage import JsonContainer

logger = logging.getLogger(__name__)

REGISTER_OK = "ok"
REGISTER_INVALID = "invalid"
REGISTER_EMPTY_USERNAME = "empty_username"
REGISTER_RESERVED = "reserved"
REGISTER_TAKEN = "taken"

LOGIN_OK = "ok"
LOGIN_INVALID = "invalid"
LOGIN_ADMIN = "admin"
LOGIN_BAD_CREDENTIALS = "bad_credentials"


@dataclass
class RegisterResult:
    status: str
    user: Optional[dict] = None

    @property
    def ok(self) -> bool:
        return self.status == REGISTER_OK


@dataclass
class UserLoginResult:
    status: str
    username: str = ""
    full_name: str = ""

    @property
    def ok(self) -> bool:
        return self.status == LOGIN_OK


class UserService:
    def __init__(self, settings: Settings, users: JsonContainer) -> None:
        self.settings = settings
        self.users = users

    def list_users(self) -> list[dict]:
        return self.users.load()

    def register(self, username: Any, password: Any, full_name: Any = None) -> RegisterResult:
        if not username or not isinstance(username, str) or not password or not isinstance(password, str):
            return RegisterResult(REGISTER_INVALID)
        trimmed = normalize_username(username)
        if not trimmed:
            return RegisterResult(REGISTER_EMPTY_USERNAME)
        if is_reserved_username(trimmed, self.settings.admin_username):
            return RegisterResult(REGISTER_RESERVED)

        with self.users.locked():
            users = self.users.load()
            if username_in_use(users, trimmed):
                return RegisterResult(REGISTER_TAKEN)
            user = {
                "id": new_record_id("u"),
                "username": trimmed,
                "password": store_password(password, hashing=self.settings.hash_passwords),
                "fullName": full_name.strip() if isinstance(full_name, str) else "",
                "createdAt": utc_timestamp(),
            }
            users.append(user)
            self.users.save(users)
        logger.info("Registered user %s", trimmed)
        return RegisterResult(REGISTER_OK, user)

    def login(self, username: Any, password: Any) -> UserLoginResult:
        if not username or not password:
            return UserLoginResult(LOGIN_INVALID)
        if username == self.settings.admin_username:
            return UserLoginResult(LOGIN_ADMIN)
        for user in self.users.load():
            if not isinstance(user, dict) or user.get("username") != username:
                continue
            if verify_password(password, user.get("password")):
                return UserLoginResult(LOGIN_OK, username=user["username"], full_name=user.get("fullName") or "")
        return UserLoginResult(LOGIN_BAD_CREDENTIALS)

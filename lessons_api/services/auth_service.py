"""
Registration and login use cases.

There are no sessions or tokens: login only confirms the credentials and
echoes the public part of the account.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lessons_api.core.errors import DuplicateError, InvalidCredentialsError, NotFoundError, ValidationError
from lessons_api.core.security import hash_password, needs_rehash, verify_password
from lessons_api.domain.orders import ensure_storable, is_valid_email, require_fields
from lessons_api.repositories.base import Repository
from lessons_api.schemas import User


@dataclass
class LoginSuccess:
    name: str
    email: str


@dataclass
class AuthService:
    """Handles registration and login against the users collection."""

    repository: Repository

    def _password(self, payload: dict) -> str:
        password = payload.get("password")
        if not isinstance(password, str) or not password:
            return ""
        ensure_storable(password, "password")
        return password

    def register(self, payload: Any) -> str:
        if not isinstance(payload, dict):
            raise ValidationError("Missing registration fields")
        fields = require_fields(payload, ("name", "email"), "registration")
        password = self._password(payload)
        if not password:
            raise ValidationError("Missing registration fields: password")
        email = fields["email"]
        if not is_valid_email(email):
            raise ValidationError("Invalid email address")
        if self.repository.find_user(email):
            raise DuplicateError("Email already registered")
        user = User(name=fields["name"], email=email, password=hash_password(password))
        return self.repository.insert_user(user.model_dump())

    def login(self, payload: Any) -> LoginSuccess:
        if not isinstance(payload, dict):
            raise ValidationError("Missing login fields")
        email = require_fields(payload, ("email",), "login")["email"]
        password = self._password(payload)
        if not password:
            raise ValidationError("Missing login fields: password")
        user = self.repository.find_user(email)
        if not user:
            raise NotFoundError("User not found")
        if not verify_password(password, user.get("password")):
            raise InvalidCredentialsError("Incorrect password")
        if needs_rehash(user["password"]):
            self.repository.set_user_password(user["email"], hash_password(password))
        return LoginSuccess(name=user.get("name", ""), email=user.get("email", email))

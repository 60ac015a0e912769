"""
Credential verification for routes that require HTTP Basic auth.
"""

from __future__ import annotations

import base64
import binascii

from fastapi import Depends, Header

from courses_api.auth.passwords import verify_password
from courses_api.dependencies import get_store
from courses_api.errors import AuthenticationFailed
from courses_api.models.user import User
from courses_api.store import Store

AUTH_HEADER_NOT_FOUND = "Auth header not found"


def parse_basic_credentials(authorization: str | None) -> tuple[str, str] | None:
    raw = (authorization or "").strip()
    parts = raw.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "basic":
        return None

    try:
        decoded = base64.b64decode(parts[1].strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    name, separator, password = decoded.partition(":")
    if not separator:
        return None
    return name, password


def authenticate(store: Store, authorization: str | None) -> User:
    credentials = parse_basic_credentials(authorization)
    if credentials is None:
        raise AuthenticationFailed(AUTH_HEADER_NOT_FOUND)

    name, password = credentials
    user = store.find_user_by_email(name)
    if user is None:
        raise AuthenticationFailed(f"User not found for username: {name}")

    if not verify_password(password, user.password):
        raise AuthenticationFailed(f"Authentication failure for email address: {user.email_address}")
    return user


def get_current_user(
    authorization: str | None = Header(default=None),
    store: Store = Depends(get_store),
) -> User:
    return authenticate(store, authorization)

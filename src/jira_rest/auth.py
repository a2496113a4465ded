"""Credentials attached to outgoing requests."""
from __future__ import annotations

import base64
from dataclasses import dataclass


@dataclass(slots=True)
class Authentication:
    """Basic-auth identity and user agent shared by a client.

    The fields are read without locking every time a request is built, so
    configure them once before the client is used from several threads.
    """

    username: str | None = None
    secret: str | None = None
    user_agent: str | None = None

    def set_basic_auth(self, username: str, secret: str) -> None:
        self.username = username
        self.secret = secret

    def has_basic_auth(self) -> bool:
        return bool(self.username) or bool(self.secret)

    def basic_auth_header(self) -> str:
        token = f"{self.username or ''}:{self.secret or ''}".encode("utf-8")
        return "Basic " + base64.b64encode(token).decode("ascii")

    def set_user_agent(self, user_agent: str) -> None:
        self.user_agent = user_agent

    def has_user_agent(self) -> bool:
        return bool(self.user_agent)


__all__ = ["Authentication"]

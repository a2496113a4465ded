"""Configuration helpers for the Jira REST client.

A small typed wrapper around the ``jira:`` section of a YAML file.  Secrets never
live in the file itself: it names the environment variables holding them, and
:func:`load_local_env` can fill those from a ``.env`` file.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

SUPPORTED_API_VERSIONS = ("2", "3")


def load_local_env(start: Path | None = None) -> Optional[Path]:
    """Load variables from the nearest ``.env`` file without overriding existing ones.

    Returns the file that was loaded, if any.
    """

    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        env_path = directory / ".env"
        if not env_path.is_file():
            continue
        with env_path.open("r", encoding="utf-8") as env_file:
            for raw_line in env_file:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))
        return env_path
    return None


def _clean(value: object) -> Optional[str]:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


@dataclass(slots=True)
class ClientConfig:
    """Connectivity settings for a Jira site."""

    site: str | None = None
    site_env: str | None = "JIRA_SITE"
    username_env: str | None = "JIRA_USERNAME"
    token_env: str | None = "JIRA_API_TOKEN"
    user_agent: str | None = None
    api_version: str = "2"
    ca_bundle: str | bool | None = None
    ca_bundle_env: str | None = "JIRA_CA_BUNDLE"
    connect_timeout: float = 5.0
    read_timeout: float = 30.0

    def __post_init__(self) -> None:
        self.site = _clean(self.site)
        self.site_env = _clean(self.site_env)
        self.ca_bundle_env = _clean(self.ca_bundle_env)
        self.api_version = str(self.api_version).strip()
        if not self.site:
            if not self.site_env:
                msg = "Jira configuration requires a site or site_env"
                raise ValueError(msg)
            token = _clean(os.getenv(self.site_env))
            if not token:
                msg = f"Environment variable {self.site_env} is not set"
                raise RuntimeError(msg)
            self.site = token
        if self.ca_bundle is None and self.ca_bundle_env:
            env_value = _clean(os.getenv(self.ca_bundle_env))
            if env_value is not None:
                if env_value.lower() in {"false", "0", "no"}:
                    self.ca_bundle = False
                else:
                    self.ca_bundle = env_value
        if self.api_version not in SUPPORTED_API_VERSIONS:
            msg = f"Unsupported Jira API version {self.api_version!r}"
            raise ValueError(msg)
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            msg = "Timeouts must be positive"
            raise ValueError(msg)

    @property
    def timeout(self) -> tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)

    def get_credentials(self) -> Optional[tuple[str, str]]:
        """Return ``(username, token)`` from the environment, or ``None`` for anonymous access.

        Naming only one of the two variables, or naming a variable that is unset, is an error.
        """

        if not self.username_env and not self.token_env:
            return None
        if not self.username_env or not self.token_env:
            msg = "Jira configuration requires both username_env and token_env"
            raise ValueError(msg)
        username = os.getenv(self.username_env)
        token = os.getenv(self.token_env)
        if not username:
            msg = f"Environment variable {self.username_env} is not set"
            raise RuntimeError(msg)
        if not token:
            msg = f"Environment variable {self.token_env} is not set"
            raise RuntimeError(msg)
        return username, token


def _load_yaml(path: Path) -> Mapping[str, object]:
    import yaml

    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, Mapping):
        msg = "Configuration file must contain a mapping"
        raise ValueError(msg)
    return data


def _optional_env_name(raw: Mapping[str, object], key: str, default: str) -> Optional[str]:
    if key not in raw:
        return default
    return _clean(raw[key])


def load_config(path: Path | str) -> ClientConfig:
    """Load client configuration from a YAML file."""

    data = _load_yaml(Path(path))
    jira = data.get("jira")
    if not isinstance(jira, Mapping):
        msg = "Configuration requires a 'jira' mapping"
        raise ValueError(msg)

    timeout = jira.get("timeout", {})
    if not isinstance(timeout, Mapping):
        timeout = {}

    return ClientConfig(
        site=_clean(jira.get("site")),
        site_env=_optional_env_name(jira, "site_env", "JIRA_SITE"),
        username_env=_optional_env_name(jira, "username_env", "JIRA_USERNAME"),
        token_env=_optional_env_name(jira, "token_env", "JIRA_API_TOKEN"),
        user_agent=_clean(jira.get("user_agent")),
        api_version=str(jira.get("api_version", "2")),
        ca_bundle=jira.get("ca_bundle"),
        ca_bundle_env=_optional_env_name(jira, "ca_bundle_env", "JIRA_CA_BUNDLE"),
        connect_timeout=float(timeout.get("connect", 5.0)),
        read_timeout=float(timeout.get("read", 30.0)),
    )


__all__ = ["ClientConfig", "SUPPORTED_API_VERSIONS", "load_config", "load_local_env"]

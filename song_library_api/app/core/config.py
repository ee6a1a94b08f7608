"""
Configuration management.

The ``Settings`` dataclass reads configuration from environment
variables, with a ``.env`` file in the working directory filling in
variables the process environment does not set.  It is built once at
startup by ``Settings.from_env`` and passed explicitly to the
collaborators that need it (logging, the database handle and the
record store).  Nothing in the application reads environment
variables after that point.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import dotenv_values

DEFAULT_ENV_FILE = ".env"


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


def _as_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    project_name: str = "Song Library API"
    api_version: str = "0.0.1"
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Address the HTTP server binds to.
    host: str = "localhost"
    port: int = 8080

    # Database connection.  Only the ``sqlite`` provider is supported; in
    # that case ``db_name`` is the path of the database file, resolved
    # relative to the project root when not absolute.  User, password,
    # host and port are informational for sqlite: they only show up in
    # ``database_url`` and ``database_address`` and in the startup log.
    db_provider: str = "sqlite"
    db_user: str = ""
    db_password: str = ""
    db_host: str = ""
    db_port: int = 0
    db_name: str = "song_library.db"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: str = DEFAULT_ENV_FILE,
    ) -> "Settings":
        """Build settings from ``environ``.

        When ``environ`` is omitted, ``os.environ`` is used on top of the
        values found in ``env_file`` (a missing file is ignored); the
        process environment wins over the file.

        Missing variables fall back to the dataclass defaults.  A
        malformed integer raises ``ValueError`` so that a broken
        deployment fails at startup instead of on the first request.
        """
        if environ is None:
            file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
            env = {**file_values, **os.environ}
        else:
            env = environ
        defaults = cls()
        return cls(
            project_name=env.get("PROJECT_NAME", defaults.project_name),
            api_version=env.get("API_VERSION", defaults.api_version),
            debug=_as_bool(env.get("DEBUG", "false")),
            log_level=env.get("LOG_LEVEL", defaults.log_level),
            log_file=env.get("LOG_FILE") or None,
            host=env.get("HOST", defaults.host),
            port=_as_int("PORT", env.get("PORT", str(defaults.port))),
            db_provider=env.get("DB_PROVIDER", defaults.db_provider),
            db_user=env.get("DB_USER", defaults.db_user),
            db_password=env.get("DB_PASSWORD", defaults.db_password),
            db_host=env.get("DB_HOST", defaults.db_host),
            db_port=_as_int("DB_PORT", env.get("DB_PORT", str(defaults.db_port))),
            db_name=env.get("DB_NAME", defaults.db_name),
        )

    @property
    def database_url(self) -> str:
        return (
            f"{self.db_provider}://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

    @property
    def database_address(self) -> str:
        return f"{self.db_host}:{self.db_port}"

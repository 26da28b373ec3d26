"""
Configuration module for the Deploy Test Application.

Loads environment variables once at startup into an immutable Settings value.
The application factory stores it on ``app.state`` and handlers receive it
through the ``get_settings`` dependency.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from fastapi import Request

from deploy_app.utils.constants import DEFAULT_ENVIRONMENT, DEFAULT_LOG_LEVEL, DEFAULT_PORT


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Listening port for the HTTP server
    port: int = DEFAULT_PORT

    # Deployment mode flag, echoed verbatim by /api/info
    environment: str = DEFAULT_ENVIRONMENT

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from the process environment.

        A ``.env`` file in the working directory is loaded first when reading
        the real environment. Pass ``environ`` to read from another mapping.

        Raises:
            ValueError: If PORT is not an integer between 1 and 65535.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            port=_parse_port(environ.get("PORT", str(DEFAULT_PORT))),
            environment=environ.get("ENVIRONMENT", DEFAULT_ENVIRONMENT),
            log_level=environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None

    if not 1 <= port <= 65535:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")

    return port


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was created with."""
    return request.app.state.settings

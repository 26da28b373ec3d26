"""
Application metadata service.

Assembles the payload reported by GET /api/info from fixed constants, the
settings the process was started with, and the running interpreter.
"""

import logging
import platform
from datetime import datetime
from typing import Optional

from deploy_app.config import Settings
from deploy_app.schemas.info import InfoResponse
from deploy_app.utils.constants import APP_NAME, APP_VERSION
from deploy_app.utils.time import utc_timestamp

logger = logging.getLogger(__name__)


def runtime_version() -> str:
    """Return the version of the running Python interpreter (e.g. "3.12.1")."""
    return platform.python_version()


def build_app_info(settings: Settings, now: Optional[datetime] = None) -> InfoResponse:
    """
    Build the application metadata response.

    Args:
        settings: Settings the application was created with
        now: Moment to report as the timestamp (defaults to current time)

    Returns:
        InfoResponse with the deployment mode echoed verbatim
    """
    logger.debug(f"Building app info for environment={settings.environment}")

    return InfoResponse(
        app=APP_NAME,
        version=APP_VERSION,
        timestamp=utc_timestamp(now),
        environment=settings.environment,
        runtime_version=runtime_version(),
    )
